"""
Elements - Named, typed handles on page elements.

An Element stores how to find a node, not the node itself: every call
to ``get_element`` searches again, so a re-rendered node never leaves
the handle stale.
"""

from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from warden.layers.sense.element_finder import ElementFinder, ElementState

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement
    from warden.core.services import Services
    from warden.layers.action.js_actions import JsActions


class Element:
    """
    Base element handle.

    Example:
        >>> button = Button((By.ID, "submit"), "Submit", ElementState.DISPLAYED, finder, services)
        >>> button.js_actions.click()
    """

    element_type = "Element"

    def __init__(
        self,
        locator: Tuple[str, str],
        name: str,
        state: ElementState,
        finder: ElementFinder,
        services: "Services",
    ):
        self.locator = locator
        self.name = name
        self.state = state
        self.finder = finder
        self.services = services
        self._js_actions: Optional["JsActions"] = None

    def get_element(self, timeout: Optional[float] = None) -> "WebElement":
        """Find the live WebElement behind this handle."""
        return self.finder.find_element(self.locator, self.name, self.state, timeout)

    @property
    def js_actions(self) -> "JsActions":
        if self._js_actions is None:
            from warden.layers.action.js_actions import JsActions

            self._js_actions = JsActions(
                self,
                self.element_type,
                self.services.logger,
                self.services.browser_profile,
                self.services.script_executor,
                self.services.browser,
                services=self.services,
            )
        return self._js_actions

    @property
    def text(self) -> str:
        return self.js_actions.get_element_text()

    def click(self) -> None:
        self.js_actions.click()

    def find_child_in_shadow_root(
        self,
        locator: Tuple[str, str],
        name: str,
        supplier: Optional[Callable[..., "Element"]] = None,
        element_cls: Optional[type] = None,
        state: ElementState = ElementState.DISPLAYED,
    ) -> "Element":
        return self.js_actions.find_element_in_shadow_root(
            locator, name, supplier=supplier, element_cls=element_cls, state=state
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, locator={self.locator!r})"


class Button(Element):
    element_type = "Button"


class Label(Element):
    element_type = "Label"


class Link(Element):
    element_type = "Link"


class TextBox(Element):
    element_type = "Text field"

    def type_by_js(self, value: Any) -> None:
        self.js_actions.set_value(str(value))
