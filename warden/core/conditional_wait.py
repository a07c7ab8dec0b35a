"""
Conditional Wait - Poll a condition until it holds.

Thin layer over Selenium's WebDriverWait that applies the configured
default timeout and polling interval.
"""

from typing import Callable, Iterable, Optional, Type, TypeVar

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.support.ui import WebDriverWait

from warden.core.settings import Timeouts

T = TypeVar("T")


class ConditionalWait:
    """
    Wait for arbitrary conditions.

    Example:
        >>> wait = ConditionalWait(Timeouts(condition=5))
        >>> wait.wait_for(lambda: len(driver.window_handles) == 2, message="Popup did not open")
        True
    """

    def __init__(self, timeouts: Timeouts):
        self.timeouts = timeouts

    def wait_for(
        self,
        condition: Callable[[], T],
        timeout: Optional[float] = None,
        polling_interval: Optional[float] = None,
        message: str = "",
        ignored_exceptions: Optional[Iterable[Type[BaseException]]] = None,
    ) -> T:
        """
        Poll ``condition`` until it returns a truthy value.

        Returns:
            The truthy value

        Raises:
            selenium.common.exceptions.TimeoutException: The condition
                never held within the timeout
        """
        ignored = tuple(ignored_exceptions) if ignored_exceptions is not None else (StaleElementReferenceException,)
        wait = WebDriverWait(
            None,
            self.timeouts.condition if timeout is None else timeout,
            poll_frequency=self.timeouts.polling_interval if polling_interval is None else polling_interval,
            ignored_exceptions=ignored,
        )
        return wait.until(lambda _: condition(), message)
