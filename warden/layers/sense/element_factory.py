"""
Element Factory - Build typed element handles.

A factory is bound to one ElementFinder, and so to one search context:
the page, or (for factories created by JsActions) a shadow root.
"""

from typing import Callable, Optional, Tuple, Type, TYPE_CHECKING

from warden.layers.sense.element_finder import ElementFinder, ElementState
from warden.layers.sense.elements import Button, Element, Label, Link, TextBox

if TYPE_CHECKING:
    from warden.core.services import Services

# (locator, name, state, finder, services) -> element
ElementSupplier = Callable[..., Element]


class ElementFactory:
    """
    Create elements that resolve through the bound finder.

    Example:
        >>> factory = services.element_factory()
        >>> host = factory.get_label((By.CSS_SELECTOR, "my-widget"), "Widget")
        >>> inner = host.find_child_in_shadow_root((By.CSS_SELECTOR, "button"), "Inner", element_cls=Button)
    """

    def __init__(self, services: "Services", finder: ElementFinder):
        self.services = services
        self.finder = finder

    def get(
        self,
        locator: Tuple[str, str],
        name: str,
        supplier: Optional[ElementSupplier] = None,
        element_cls: Optional[Type[Element]] = None,
        state: ElementState = ElementState.DISPLAYED,
    ) -> Element:
        """
        Wait for the element to reach ``state`` and return a handle to it.

        Args:
            locator: ``(By.<strategy>, value)``
            name: Logical name used in logs and errors
            supplier: Custom constructor, takes precedence over ``element_cls``
            element_cls: Element class to build, Label by default
            state: Required state

        Raises:
            ElementNotFoundError: The element never reached ``state``
        """
        build = supplier or (element_cls or Label)
        element = build(locator, name, state, self.finder, self.services)
        element.get_element()
        return element

    def get_button(self, locator: Tuple[str, str], name: str, state: ElementState = ElementState.DISPLAYED) -> Button:
        return self.get(locator, name, element_cls=Button, state=state)

    def get_label(self, locator: Tuple[str, str], name: str, state: ElementState = ElementState.DISPLAYED) -> Label:
        return self.get(locator, name, element_cls=Label, state=state)

    def get_link(self, locator: Tuple[str, str], name: str, state: ElementState = ElementState.DISPLAYED) -> Link:
        return self.get(locator, name, element_cls=Link, state=state)

    def get_text_box(self, locator: Tuple[str, str], name: str, state: ElementState = ElementState.DISPLAYED) -> TextBox:
        return self.get(locator, name, element_cls=TextBox, state=state)

