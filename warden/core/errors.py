"""
Errors - Typed failures raised by the action engine.

Every failure that leaves the engine names the script or lookup that
failed and the logical name of the element involved.
"""

from typing import Any, Optional


class WardenError(Exception):
    """Base class for all warden failures."""


class PreconditionViolation(WardenError, ValueError):
    """Invalid input detected before anything ran. Never retried."""


class SettingsError(WardenError):
    """A configuration value is missing or cannot be coerced."""


class ScriptResultError(WardenError, ValueError):
    """A script returned a value of an unexpected shape."""

    def __init__(self, script_name: str, expected: str, value: Any):
        self.script_name = script_name
        self.expected = expected
        self.value = value
        super().__init__(
            f"Script '{script_name}' returned {value!r}, expected {expected}"
        )


class ActionExecutionError(WardenError):
    """
    A script invocation failed after the retry budget was spent,
    or failed with a non-transient session error.
    """

    def __init__(
        self,
        script_name: str,
        element_name: Optional[str],
        cause: BaseException,
        attempts: int = 1,
    ):
        self.script_name = script_name
        self.element_name = element_name
        self.cause = cause
        self.attempts = attempts
        cause_text = str(cause).strip().splitlines()[0] if str(cause).strip() else ""
        super().__init__(
            f"Action '{script_name}' failed on element '{element_name}' "
            f"after {attempts} attempt(s): {type(cause).__name__}"
            + (f": {cause_text}" if cause_text else "")
        )


class ElementNotFoundError(WardenError):
    """An element did not reach the required state within the timeout."""

    def __init__(self, locator: Any, name: str, state: Any, timeout: float):
        self.locator = locator
        self.name = name
        self.state = state
        self.timeout = timeout
        super().__init__(
            f"Element '{name}' located by {locator} was not found in state "
            f"{getattr(state, 'value', state)} within {timeout}s"
        )
