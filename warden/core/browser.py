"""
Browser - The session the action engine runs scripts through.

Wraps a Selenium WebDriver with the two primitives the engine needs:
run a catalog script in the page, and wait for the page to finish
loading. One Browser is shared by every element built on it; actions
against it are expected to be issued one at a time.
"""

from typing import Any, Optional, TYPE_CHECKING

from selenium.webdriver.support.ui import WebDriverWait

from warden.core.settings import Timeouts
from warden.layers.action.scripts import JavaScript

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from warden.reporters.localized_logger import LocalizedLogger


class Browser:
    """
    Script execution and page-load waiting over a WebDriver.

    Example:
        >>> browser = Browser(driver, Timeouts(page_load=20))
        >>> browser.go_to("https://example.com")
        >>> browser.execute_script(JavaScript.GET_ELEMENT_TEXT, element)
        'Example Domain'
    """

    def __init__(
        self,
        driver: "WebDriver",
        timeouts: Optional[Timeouts] = None,
        logger: Optional["LocalizedLogger"] = None,
    ):
        self.driver = driver
        self.timeouts = timeouts or Timeouts()
        self.logger = logger

    def execute_script(self, script: JavaScript, *args: Any) -> Any:
        """
        Run a catalog script in the page.

        Args:
            script: Script to run
            *args: Script arguments, exposed as ``arguments[i]``

        Returns:
            The raw value returned by the script engine
        """
        return self.driver.execute_script(script.body, *args)

    def wait_for_page_to_load(self) -> None:
        """
        Block until ``document.readyState`` is ``complete``.

        Raises:
            selenium.common.exceptions.TimeoutException: The page did not
                finish loading within ``timeouts.page_load``
        """
        if self.logger is not None:
            self.logger.debug("loc.browser.page.wait")
        WebDriverWait(
            self.driver,
            self.timeouts.page_load,
            poll_frequency=self.timeouts.polling_interval,
        ).until(
            lambda d: d.execute_script("return document.readyState") == "complete",
            f"Page was not loaded within {self.timeouts.page_load}s",
        )

    def go_to(self, url: str) -> None:
        if self.logger is not None:
            self.logger.info("loc.browser.navigate", url)
        self.driver.get(url)

    def quit(self) -> None:
        self.driver.quit()
