"""
Services - Composition root for the action engine.

Everything an element needs at action time (session, profile, retry
policy, logger) is bundled here and passed in explicitly. There is no
module-level state, so tests build a Services from fakes.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from warden.core.browser import Browser
from warden.core.conditional_wait import ConditionalWait
from warden.core.retrier import ActionRetrier
from warden.core.settings import BrowserProfile, JsonSettings, RetryPolicy, Timeouts
from warden.layers.action.executor import ScriptExecutor
from warden.reporters.flight_recorder import FlightRecorder
from warden.reporters.localization import LocalizationManager
from warden.reporters.localized_logger import LocalizedLogger

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from warden.layers.sense.element_factory import ElementFactory


@dataclass
class Services:
    """Shared collaborators for every element built on one browser session."""
    browser: Browser
    browser_profile: BrowserProfile
    retry_policy: RetryPolicy
    timeouts: Timeouts
    logger: LocalizedLogger
    conditional_wait: ConditionalWait
    action_retrier: ActionRetrier
    script_executor: ScriptExecutor

    @classmethod
    def create(
        cls,
        driver: "WebDriver",
        settings: Optional[JsonSettings] = None,
        recorder: Optional[FlightRecorder] = None,
    ) -> "Services":
        """
        Wire services for a driver.

        Args:
            driver: Live Selenium WebDriver
            settings: Configuration, bundled defaults when omitted
            recorder: Optional FlightRecorder receiving every log entry

        Example:
            >>> services = Services.create(driver, JsonSettings.from_file("settings.json"))
            >>> services.element_factory().get_button((By.ID, "go"), "Go").js_actions.click()
        """
        settings = settings or JsonSettings.defaults()
        timeouts = Timeouts.from_settings(settings)
        retry_policy = RetryPolicy.from_settings(settings)
        language = settings.get_or_default(".logger.language", "en")
        logger = LocalizedLogger(LocalizationManager(language), recorder=recorder)
        browser = Browser(driver, timeouts, logger)
        retrier = ActionRetrier(retry_policy)
        return cls(
            browser=browser,
            browser_profile=BrowserProfile.from_settings(settings),
            retry_policy=retry_policy,
            timeouts=timeouts,
            logger=logger,
            conditional_wait=ConditionalWait(timeouts),
            action_retrier=retrier,
            script_executor=ScriptExecutor(browser, retrier),
        )

    def element_factory(self) -> "ElementFactory":
        """Factory for elements searched from the whole page."""
        from warden.layers.sense.element_factory import ElementFactory
        from warden.layers.sense.element_finder import ElementFinder

        finder = ElementFinder(self.logger, self.conditional_wait, lambda: self.browser.driver)
        return ElementFactory(self, finder)
