import pytest
from unittest.mock import MagicMock, call
from selenium.common.exceptions import ElementClickInterceptedException, WebDriverException

from warden.core.errors import ActionExecutionError, PreconditionViolation, ScriptResultError
from warden.core.settings import BrowserProfile
from warden.layers.action.js_actions import HighlightState, JsActions, Point, round_half_away_from_zero
from warden.layers.action.scripts import JavaScript
from warden.reporters.flight_recorder import FlightRecorder
from warden.reporters.localization import LocalizationManager
from warden.reporters.localized_logger import LocalizedLogger


def scripts_run(browser):
    return [c.args[0] for c in browser.execute_script.call_args_list]


class TestArgumentBinding:
    """The bound element is always the first script argument."""

    @pytest.mark.parametrize("method, args, script, extra", [
        ("click", (), JavaScript.CLICK_ELEMENT, ()),
        ("scroll_into_view", (), JavaScript.SCROLL_TO_ELEMENT, (True,)),
        ("scroll_by", (15, -20), JavaScript.SCROLL_BY, (15, -20)),
        ("scroll_to_the_center", (), JavaScript.SCROLL_TO_ELEMENT_CENTER, ()),
        ("set_value", ("abc",), JavaScript.SET_VALUE, ("abc",)),
        ("set_focus", (), JavaScript.SET_FOCUS, ()),
        ("hover_mouse", (), JavaScript.MOUSE_HOVER, ()),
        ("highlight_element", (HighlightState.HIGHLIGHT,), JavaScript.BORDER_ELEMENT, ()),
    ])
    def test_element_first(self, make_actions, browser, element, method, args, script, extra):
        getattr(make_actions(), method)(*args)

        browser.execute_script.assert_called_once_with(script, element.web_element, *extra)

    @pytest.mark.parametrize("method, value", [
        ("is_element_on_screen", True),
        ("get_element_text", "Hello"),
        ("get_xpath", "/html/body[1]/div[2]"),
        ("get_viewport_coordinates", [1, 2]),
    ])
    def test_reads_pass_only_the_element(self, make_actions, browser, element, method, value):
        browser.execute_script.return_value = value

        getattr(make_actions(), method)()

        assert browser.execute_script.call_args.args[1:] == (element.web_element,)

    def test_requires_element(self, logger, executor, browser):
        with pytest.raises(PreconditionViolation):
            JsActions(None, "Label", logger, BrowserProfile(), executor, browser)


class TestLogging:
    """Pre-action log entries, and value log entries for reads."""

    def test_get_element_text(self, make_actions, browser, logger):
        browser.execute_script.return_value = "Hello"

        assert make_actions().get_element_text() == "Hello"
        assert logger.info_element_action.call_args_list == [
            call("Label", "Greeting", "loc.get.text.js"),
            call("Label", "Greeting", "loc.text.value", "Hello"),
        ]

    def test_get_element_text_with_flight_recorder(self, element, executor, browser):
        recorder = FlightRecorder()
        actions = JsActions(
            element, "Label", LocalizedLogger(LocalizationManager(), recorder=recorder),
            BrowserProfile(), executor, browser,
        )
        browser.execute_script.return_value = "Hello"

        assert actions.get_element_text() == "Hello"
        assert recorder.keys() == [["loc.get.text.js"], ["loc.text.value", "Hello"]]
        assert recorder.entries[1].message == "Element's text: 'Hello'"
        assert recorder.entries[1].element_name == "Greeting"

    def test_is_element_on_screen(self, make_actions, browser, logger):
        browser.execute_script.return_value = False

        assert make_actions().is_element_on_screen() is False
        assert logger.info_element_action.call_args_list == [
            call("Label", "Greeting", "loc.is.present.js"),
            call("Label", "Greeting", "loc.is.present.value", False),
        ]

    def test_get_xpath(self, make_actions, browser, logger):
        browser.execute_script.return_value = "/html/body[1]"

        assert make_actions().get_xpath() == "/html/body[1]"
        assert logger.info_element_action.call_args_list == [
            call("Label", "Greeting", "loc.get.xpath.js"),
            call("Label", "Greeting", "loc.xpath.value", "/html/body[1]"),
        ]

    def test_set_value_logs_value(self, make_actions, logger):
        make_actions(element_type="Text field").set_value("secret")

        logger.info_element_action.assert_called_once_with("Text field", "Greeting", "loc.setting.value", "secret")

    def test_empty_text_is_logged(self, make_actions, browser, logger):
        browser.execute_script.return_value = None

        assert make_actions().get_element_text() == ""
        assert logger.info_element_action.call_args_list[-1] == call("Label", "Greeting", "loc.text.value", "")

    def test_no_value_log_when_read_fails(self, make_actions, browser, logger):
        browser.execute_script.side_effect = WebDriverException("session gone")

        with pytest.raises(ActionExecutionError):
            make_actions().get_element_text()
        assert logger.info_element_action.call_args_list == [call("Label", "Greeting", "loc.get.text.js")]


class TestHighlight:

    @pytest.mark.parametrize("flag, state, expected", [
        (True, HighlightState.DEFAULT, True),
        (True, HighlightState.HIGHLIGHT, True),
        (True, HighlightState.NOT_HIGHLIGHT, False),
        (False, HighlightState.DEFAULT, False),
        (False, HighlightState.HIGHLIGHT, True),
        (False, HighlightState.NOT_HIGHLIGHT, False),
    ])
    def test_matrix(self, make_actions, browser, flag, state, expected):
        make_actions(highlight_enabled=flag).highlight_element(state)

        assert (JavaScript.BORDER_ELEMENT in scripts_run(browser)) is expected

    def test_click_highlights_before_clicking(self, make_actions, browser):
        make_actions(highlight_enabled=True).click()

        assert scripts_run(browser) == [JavaScript.BORDER_ELEMENT, JavaScript.CLICK_ELEMENT]

    def test_click_suppressed(self, make_actions, browser):
        make_actions(highlight_enabled=True).click(HighlightState.NOT_HIGHLIGHT)

        assert scripts_run(browser) == [JavaScript.CLICK_ELEMENT]

    @pytest.mark.parametrize("method, args", [
        ("set_value", ("x",)),
        ("set_focus", ()),
        ("hover_mouse", ()),
    ])
    def test_interactions_can_force(self, make_actions, browser, method, args):
        getattr(make_actions(), method)(*args, highlight_state=HighlightState.HIGHLIGHT)

        assert scripts_run(browser)[0] is JavaScript.BORDER_ELEMENT

    def test_reads_never_highlight(self, make_actions, browser):
        browser.execute_script.return_value = "text"

        make_actions(highlight_enabled=True).get_element_text()

        assert scripts_run(browser) == [JavaScript.GET_ELEMENT_TEXT]


class TestClickAndWait:

    def test_waits_after_click(self, make_actions, browser):
        order = MagicMock()
        browser.execute_script.side_effect = lambda *a: order.script(a[0])
        browser.wait_for_page_to_load.side_effect = lambda: order.wait()

        make_actions().click_and_wait()

        assert order.mock_calls == [call.script(JavaScript.CLICK_ELEMENT), call.wait()]

    def test_never_waits_when_click_fails(self, make_actions, browser):
        browser.execute_script.side_effect = ElementClickInterceptedException("covered")

        with pytest.raises(ActionExecutionError):
            make_actions().click_and_wait()
        browser.wait_for_page_to_load.assert_not_called()

    def test_never_waits_when_retries_exhausted(self, make_actions, browser):
        from selenium.common.exceptions import StaleElementReferenceException

        browser.execute_script.side_effect = StaleElementReferenceException("stale")

        with pytest.raises(ActionExecutionError) as info:
            make_actions().click_and_wait()
        assert info.value.attempts == 3
        browser.wait_for_page_to_load.assert_not_called()

    def test_wait_failure_surfaces(self, make_actions, browser):
        from selenium.common.exceptions import TimeoutException

        browser.wait_for_page_to_load.side_effect = TimeoutException("page load")

        with pytest.raises(TimeoutException):
            make_actions().click_and_wait()


class TestViewportCoordinates:

    @pytest.mark.parametrize("raw, expected", [
        ([12.4, 7.6], Point(12, 8)),
        ([12.5, -0.4], Point(13, 0)),
        (["12.5", "-0.4"], Point(13, 0)),
        ([-2.5, 0.5], Point(-3, 1)),
        ([0, 1080], Point(0, 1080)),
    ])
    def test_rounding(self, make_actions, browser, raw, expected):
        browser.execute_script.return_value = raw

        assert make_actions().get_viewport_coordinates() == expected

    def test_non_numeric_is_fatal(self, make_actions, browser):
        browser.execute_script.return_value = ["12px", 3]

        with pytest.raises(ScriptResultError):
            make_actions().get_viewport_coordinates()
        assert browser.execute_script.call_count == 1

    def test_too_few_coordinates(self, make_actions, browser):
        browser.execute_script.return_value = [4]

        with pytest.raises(ScriptResultError):
            make_actions().get_viewport_coordinates()

    def test_point_unpacks(self):
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)

    def test_round_half_away_from_zero(self):
        assert round_half_away_from_zero(0.5) == 1
        assert round_half_away_from_zero(-0.5) == -1
        assert round_half_away_from_zero(2.4999) == 2
