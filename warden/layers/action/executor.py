"""
Script Executor - Retried, typed script invocation.

Builds the argument list for a script (target element first, always),
runs it through the Browser under the shared retry policy and decodes
the loosely-typed result into one of a closed set of Python types.
"""

from typing import Any, List, Optional, Type, TYPE_CHECKING
import math

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.shadowroot import ShadowRoot

from warden.core.errors import ActionExecutionError, ElementNotFoundError, PreconditionViolation, ScriptResultError
from warden.core.retrier import ActionRetrier, RetryExhaustedError
from warden.layers.action.scripts import JavaScript

if TYPE_CHECKING:
    from warden.core.browser import Browser
    from warden.layers.sense.elements import Element


# Result types a script may be decoded into
SUPPORTED_RETURN_TYPES = (bool, str, float, list, ShadowRoot, type(None))


def resolve_arguments(element: "Element", *args: Any) -> List[Any]:
    """
    Build a script argument list with the live target element first.

    Args:
        element: Bound element handle
        *args: Action-specific arguments

    Returns:
        ``[element.get_element(), *args]``

    Raises:
        PreconditionViolation: ``element`` is None
    """
    if element is None:
        raise PreconditionViolation("Script target element must not be None")
    return [element.get_element(), *args]


def decode_result(script: JavaScript, value: Any, returns: Optional[Type[Any]]) -> Any:
    """
    Decode a raw script result into ``returns``.

    ``float`` accepts ints and numeric strings; ``list`` yields a list of
    floats. ``None`` (the default) discards the value.
    """
    if returns is None or returns is type(None):
        return None

    if returns is bool:
        if isinstance(value, bool):
            return value
        raise ScriptResultError(script.script_name, "bool", value)

    if returns is str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise ScriptResultError(script.script_name, "str", value)

    if returns is float:
        return _to_float(script, value)

    if returns is list:
        if not isinstance(value, (list, tuple)):
            raise ScriptResultError(script.script_name, "sequence of numbers", value)
        return [_to_float(script, item) for item in value]

    if returns is ShadowRoot:
        if isinstance(value, ShadowRoot):
            return value
        raise ScriptResultError(script.script_name, "shadow root", value)

    raise TypeError(f"Unsupported script return type {returns!r}; expected one of {SUPPORTED_RETURN_TYPES}")


def _to_float(script: JavaScript, value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ScriptResultError(script.script_name, "number", value)
    try:
        number = float(str(value).strip())
    except ValueError as e:
        raise ScriptResultError(script.script_name, "number", value) from e
    if not math.isfinite(number):
        raise ScriptResultError(script.script_name, "finite number", value)
    return number


class ScriptExecutor:
    """
    Execute catalog scripts against an element with retries.

    Each attempt resolves the element again and runs the script from
    scratch, so scripts must be idempotent. Nothing is logged here.

    Example:
        >>> executor = ScriptExecutor(browser, ActionRetrier(RetryPolicy()))
        >>> executor.execute(JavaScript.GET_ELEMENT_TEXT, label, returns=str)
        'Hello'
    """

    def __init__(self, browser: "Browser", retrier: ActionRetrier):
        self.browser = browser
        self.retrier = retrier

    def execute(
        self,
        script: JavaScript,
        element: "Element",
        *args: Any,
        returns: Optional[Type[Any]] = None,
    ) -> Any:
        """
        Run ``script`` with ``element`` as ``arguments[0]``.

        Args:
            script: Catalog script
            element: Target element handle
            *args: Extra script arguments
            returns: Expected result type, see ``decode_result``

        Returns:
            The decoded result, or None

        Raises:
            PreconditionViolation: ``element`` is None
            ActionExecutionError: The retry budget was exhausted, the
                element could not be found, or a non-transient session
                error occurred
            ScriptResultError: The script returned an unexpected shape
        """
        if element is None:
            raise PreconditionViolation(f"Script '{script.script_name}' requires a target element")

        def attempt() -> Any:
            return self.browser.execute_script(script, *resolve_arguments(element, *args))

        try:
            value = self.retrier.do_with_retry(attempt, description=script.script_name)
        except RetryExhaustedError as e:
            raise ActionExecutionError(
                script.script_name, element.name, e.last_error, attempts=e.attempts
            ) from e.last_error
        except (ElementNotFoundError, WebDriverException) as e:
            raise ActionExecutionError(script.script_name, element.name, e) from e

        return decode_result(script, value, returns)
