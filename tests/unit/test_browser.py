import pytest
from unittest.mock import MagicMock
from selenium.common.exceptions import TimeoutException

from warden.core.browser import Browser
from warden.core.services import Services
from warden.core.settings import JsonSettings, Timeouts
from warden.layers.action.scripts import JavaScript
from warden.reporters.flight_recorder import FlightRecorder


class TestBrowser:

    def test_execute_script_sends_body(self):
        driver = MagicMock()
        driver.execute_script.return_value = "ok"
        web = MagicMock()

        assert Browser(driver).execute_script(JavaScript.SCROLL_BY, web, 1, 2) == "ok"
        driver.execute_script.assert_called_once_with(JavaScript.SCROLL_BY.body, web, 1, 2)

    def test_wait_for_page_to_load(self):
        driver = MagicMock()
        driver.execute_script.side_effect = ["loading", "interactive", "complete"]

        Browser(driver, Timeouts(page_load=1, polling_interval=0.01)).wait_for_page_to_load()

        assert driver.execute_script.call_count == 3

    def test_wait_for_page_to_load_times_out(self):
        driver = MagicMock()
        driver.execute_script.return_value = "loading"

        with pytest.raises(TimeoutException):
            Browser(driver, Timeouts(page_load=0.05, polling_interval=0.01)).wait_for_page_to_load()

    def test_go_to_logs(self):
        driver = MagicMock()
        logger = MagicMock()

        Browser(driver, logger=logger).go_to("https://example.com")

        driver.get.assert_called_once_with("https://example.com")
        logger.info.assert_called_once_with("loc.browser.navigate", "https://example.com")


class TestServices:

    def test_create_from_settings(self):
        driver = MagicMock()
        recorder = FlightRecorder()
        settings = JsonSettings({
            "browserProfile": {"isElementHighlightEnabled": True},
            "retry": {"maxAttempts": 5, "pollingInterval": 0},
            "logger": {"language": "ru"},
        })

        services = Services.create(driver, settings, recorder=recorder)

        assert services.browser.driver is driver
        assert services.browser_profile.is_element_highlight_enabled is True
        assert services.retry_policy.max_attempts == 5
        assert services.action_retrier.policy is services.retry_policy
        assert services.script_executor.browser is services.browser
        assert services.logger.recorder is recorder
        assert services.logger.localization.language == "ru"

    def test_create_with_defaults(self):
        services = Services.create(MagicMock())

        assert services.retry_policy.max_attempts == 3
        assert services.timeouts.condition == 15
