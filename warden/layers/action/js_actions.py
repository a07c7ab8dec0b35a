"""
JS Actions - Element actions performed by injected JavaScript.

The public face of the action engine. Every action logs what it is
about to do, optionally highlights the element, then runs its script
through the retrying ScriptExecutor. Reads also log the value they got.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Callable, Optional, Tuple, Type, TYPE_CHECKING

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.remote.shadowroot import ShadowRoot

from warden.core.errors import PreconditionViolation, ScriptResultError
from warden.core.settings import BrowserProfile
from warden.layers.action.executor import ScriptExecutor
from warden.layers.action.scripts import JavaScript
from warden.layers.sense.element_finder import ElementFinder, ElementState

if TYPE_CHECKING:
    from warden.core.browser import Browser
    from warden.core.services import Services
    from warden.layers.sense.elements import Element
    from warden.reporters.localized_logger import LocalizedLogger


class HighlightState(Enum):
    """Per-call override of the profile's highlight flag."""
    DEFAULT = "default"
    HIGHLIGHT = "highlight"
    NOT_HIGHLIGHT = "not_highlight"


@dataclass(frozen=True)
class Point:
    """Integer pixel position relative to the viewport."""
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, .5 away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class JsActions:
    """
    Perform actions on one element via JavaScript.

    Example:
        >>> actions = JsActions(button, "Button", logger, profile, executor, browser)
        >>> actions.click_and_wait()
        >>> actions.get_viewport_coordinates()
        Point(x=120, y=48)
    """

    def __init__(
        self,
        element: "Element",
        element_type: str,
        logger: "LocalizedLogger",
        browser_profile: BrowserProfile,
        executor: ScriptExecutor,
        browser: "Browser",
        services: Optional["Services"] = None,
    ):
        if element is None:
            raise PreconditionViolation("JsActions requires an element")
        self.element = element
        self.element_type = element_type
        self.logger = logger
        self.browser_profile = browser_profile
        self.executor = executor
        self.browser = browser
        self.services = services

    # Shadow DOM

    def expand_shadow_root(self) -> ShadowRoot:
        """
        Expand the element's shadow root.

        Returns:
            A search context scoped to the shadow root
        """
        self.log_element_action("loc.shadowroot.expand.js")
        return self.execute_script(JavaScript.EXPAND_SHADOW_ROOT, returns=ShadowRoot)

    def find_element_in_shadow_root(
        self,
        locator: Tuple[str, str],
        name: str,
        supplier: Optional[Callable[..., "Element"]] = None,
        element_cls: Optional[Type["Element"]] = None,
        state: ElementState = ElementState.DISPLAYED,
    ) -> "Element":
        """
        Find an element inside this element's shadow root.

        The shadow root is expanded again on every lookup, because the
        host may re-render and replace it between lookups.

        Args:
            locator: ``(By.<strategy>, value)``. Chromium rejects XPath
                inside shadow roots; use CSS selectors there.
            name: Logical name of the target element
            supplier: Custom constructor ``(locator, name, state, finder, services)``
            element_cls: Element class to build when no supplier is given
            state: Required state of the target element

        Returns:
            The typed element, bound to a finder that searches the shadow root
        """
        from warden.layers.sense.element_factory import ElementFactory

        if self.services is None:
            raise PreconditionViolation(
                f"Cannot search the shadow root of '{self.element.name}' without services"
            )
        # A host that is not upgraded yet has no shadow root; keep polling
        shadow_root_finder = ElementFinder(
            self.logger,
            self.services.conditional_wait,
            self.expand_shadow_root,
            ignored_exceptions=(StaleElementReferenceException, ScriptResultError),
        )
        shadow_root_factory = ElementFactory(self.services, shadow_root_finder)
        return shadow_root_factory.get(locator, name, supplier=supplier, element_cls=element_cls, state=state)

    # Interactions

    def click(self, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        self.log_element_action("loc.clicking.js")
        self.highlight_element(highlight_state)
        self.execute_script(JavaScript.CLICK_ELEMENT)

    def click_and_wait(self, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        """Click the element, then wait for the page to load."""
        self.click(highlight_state)
        self.browser.wait_for_page_to_load()

    def highlight_element(self, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        """
        Draw a border around the element.

        Runs when the profile enables highlighting or the caller forces it;
        an explicit NOT_HIGHLIGHT suppresses it regardless of the profile.
        """
        if highlight_state is HighlightState.NOT_HIGHLIGHT:
            return
        if self.browser_profile.is_element_highlight_enabled or highlight_state is HighlightState.HIGHLIGHT:
            self.execute_script(JavaScript.BORDER_ELEMENT)

    def scroll_into_view(self) -> None:
        self.log_element_action("loc.scrolling.js")
        self.execute_script(JavaScript.SCROLL_TO_ELEMENT, True)

    def scroll_by(self, x: int, y: int) -> None:
        """
        Scroll the element's own scrollable region by (x, y).

        The element must contain an inner scroll bar.
        """
        self.log_element_action("loc.scrolling.js")
        self.execute_script(JavaScript.SCROLL_BY, x, y)

    def scroll_to_the_center(self) -> None:
        """Scroll so the element's upper bound sits in the middle of the viewport."""
        self.log_element_action("loc.scrolling.center.js")
        self.execute_script(JavaScript.SCROLL_TO_ELEMENT_CENTER)

    def set_value(self, value: str, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        self.log_element_action("loc.setting.value", value)
        self.highlight_element(highlight_state)
        self.execute_script(JavaScript.SET_VALUE, value)

    def set_focus(self, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        self.log_element_action("loc.focusing")
        self.highlight_element(highlight_state)
        self.execute_script(JavaScript.SET_FOCUS)

    def hover_mouse(self, highlight_state: HighlightState = HighlightState.DEFAULT) -> None:
        self.log_element_action("loc.hover.js")
        self.highlight_element(highlight_state)
        self.execute_script(JavaScript.MOUSE_HOVER)

    # Reads

    def is_element_on_screen(self) -> bool:
        self.log_element_action("loc.is.present.js")
        value = self.execute_script(JavaScript.ELEMENT_IS_ON_SCREEN, returns=bool)
        self.log_element_action("loc.is.present.value", value)
        return value

    def get_element_text(self) -> str:
        self.log_element_action("loc.get.text.js")
        value = self.execute_script(JavaScript.GET_ELEMENT_TEXT, returns=str)
        self.log_element_action("loc.text.value", value)
        return value

    def get_xpath(self) -> str:
        self.log_element_action("loc.get.xpath.js")
        value = self.execute_script(JavaScript.GET_ELEMENT_XPATH, returns=str)
        self.log_element_action("loc.xpath.value", value)
        return value

    def get_viewport_coordinates(self) -> Point:
        """
        Element position relative to the viewport.

        Returns:
            Point with each coordinate rounded to the nearest pixel
        """
        self.log_element_action("loc.get.viewport.coordinates.js")
        coordinates = self.execute_script(JavaScript.GET_VIEWPORT_COORDINATES, returns=list)
        if len(coordinates) < 2:
            raise ScriptResultError(JavaScript.GET_VIEWPORT_COORDINATES.script_name, "two coordinates", coordinates)
        point = Point(round_half_away_from_zero(coordinates[0]), round_half_away_from_zero(coordinates[1]))
        self.log_element_action("loc.viewport.coordinates.value", f"({point.x}, {point.y})")
        return point

    def execute_script(self, script: JavaScript, *args: Any, returns: Optional[Type[Any]] = None) -> Any:
        return self.executor.execute(script, self.element, *args, returns=returns)

    def log_element_action(self, message_key: str, *args: Any) -> None:
        self.logger.info_element_action(self.element_type, self.element.name, message_key, *args)
