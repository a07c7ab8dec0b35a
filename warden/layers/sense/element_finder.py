"""
Element Finder - Locate elements within a search context.

The search context is never stored: a zero-argument provider is called
on every poll, so a context that gets torn down and rebuilt (a shadow
root after a re-render) is picked up fresh instead of going stale.
"""

from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Type, TYPE_CHECKING

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException

from warden.core.conditional_wait import ConditionalWait
from warden.core.errors import ElementNotFoundError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement
    from warden.reporters.localized_logger import LocalizedLogger

Locator = Tuple[str, str]
SearchContextProvider = Callable[[], Any]


class ElementState(Enum):
    """State an element must reach to count as found."""
    DISPLAYED = "displayed"
    EXISTS_IN_ANY_STATE = "exists"

    def matches(self, element: "WebElement") -> bool:
        if self is ElementState.DISPLAYED:
            return element.is_displayed()
        return True


class ElementFinder:
    """
    Find elements under a lazily provided search context.

    Example:
        >>> finder = ElementFinder(logger, wait, lambda: driver)
        >>> finder.find_element((By.CSS_SELECTOR, "#submit"), "Submit", ElementState.DISPLAYED)
        <selenium.webdriver.remote.webelement.WebElement ...>
    """

    def __init__(
        self,
        logger: "LocalizedLogger",
        conditional_wait: ConditionalWait,
        context_provider: SearchContextProvider,
        ignored_exceptions: Tuple[Type[BaseException], ...] = (StaleElementReferenceException,),
    ):
        self.logger = logger
        self.conditional_wait = conditional_wait
        self.context_provider = context_provider
        self.ignored_exceptions = ignored_exceptions

    def find_element(
        self,
        locator: Locator,
        name: str,
        state: ElementState = ElementState.DISPLAYED,
        timeout: Optional[float] = None,
    ) -> "WebElement":
        """
        Wait for the first element matching ``locator`` in ``state``.

        Raises:
            ElementNotFoundError: Nothing reached ``state`` within the timeout
        """
        self.logger.debug("loc.search.of.elements", name, locator, state.value)

        def first_match():
            matches = self._find_in_state(locator, state)
            return matches[0] if matches else False

        budget = self.conditional_wait.timeouts.condition if timeout is None else timeout
        try:
            return self.conditional_wait.wait_for(
                first_match,
                timeout=budget,
                message=f"Element '{name}' not found",
                ignored_exceptions=self.ignored_exceptions,
            )
        except TimeoutException as e:
            raise ElementNotFoundError(locator, name, state, budget) from e

    def _find_in_state(self, locator: Locator, state: ElementState) -> List["WebElement"]:
        context = self.context_provider()
        return [element for element in context.find_elements(*locator) if state.matches(element)]
