"""Shared fakes for the action engine: no browser is ever started here."""

import pytest
from unittest.mock import MagicMock

from warden.core.conditional_wait import ConditionalWait
from warden.core.retrier import ActionRetrier
from warden.core.services import Services
from warden.core.settings import BrowserProfile, RetryPolicy, Timeouts
from warden.layers.action.executor import ScriptExecutor
from warden.layers.action.js_actions import JsActions


class FakeElement:
    """Stands in for an Element: a name and a live node it resolves to."""

    def __init__(self, name="Greeting", web_element=None):
        self.name = name
        self.web_element = web_element if web_element is not None else MagicMock(name=f"web:{name}")
        self.resolve_count = 0

    def get_element(self, timeout=None):
        self.resolve_count += 1
        return self.web_element


@pytest.fixture
def sleeps():
    """Records retry delays instead of sleeping."""
    return []


@pytest.fixture
def retry_policy():
    return RetryPolicy(max_attempts=3, polling_interval=0.25)


@pytest.fixture
def retrier(retry_policy, sleeps):
    return ActionRetrier(retry_policy, sleep=sleeps.append)


@pytest.fixture
def browser():
    fake = MagicMock(name="browser")
    fake.execute_script.return_value = None
    return fake


@pytest.fixture
def executor(browser, retrier):
    return ScriptExecutor(browser, retrier)


@pytest.fixture
def logger():
    return MagicMock(name="logger")


@pytest.fixture
def element():
    return FakeElement()


@pytest.fixture
def fake_element():
    """Factory for extra fake elements."""
    return FakeElement


@pytest.fixture
def timeouts():
    return Timeouts(condition=0.2, page_load=0.2, polling_interval=0.01)


@pytest.fixture
def services(browser, logger, retry_policy, retrier, executor, timeouts):
    return Services(
        browser=browser,
        browser_profile=BrowserProfile(),
        retry_policy=retry_policy,
        timeouts=timeouts,
        logger=logger,
        conditional_wait=ConditionalWait(timeouts),
        action_retrier=retrier,
        script_executor=executor,
    )


@pytest.fixture
def make_actions(element, logger, executor, browser, services):
    """Build JsActions over the fakes, with an optional highlight flag."""
    def build(highlight_enabled=False, target=None, element_type="Label"):
        return JsActions(
            target if target is not None else element,
            element_type,
            logger,
            BrowserProfile(is_element_highlight_enabled=highlight_enabled),
            executor,
            browser,
            services=services,
        )
    return build
