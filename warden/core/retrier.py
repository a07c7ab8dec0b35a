"""
Retrier - Re-run an operation while it fails transiently.

The retry loop knows nothing about what it wraps: it calls a
zero-argument operation until it succeeds, the attempt budget runs out,
or it raises something that is not worth retrying.
"""

from typing import Callable, Optional, Tuple, Type, TypeVar
import logging
import time

from selenium.common.exceptions import (
    ElementNotInteractableException,
    InvalidElementStateException,
    JavascriptException,
    StaleElementReferenceException,
)

from warden.core.settings import RetryPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures caused by a page that is still rendering or re-rendering
TRANSIENT_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    StaleElementReferenceException,
    ElementNotInteractableException,
    InvalidElementStateException,
    JavascriptException,
)


class RetryExhaustedError(Exception):
    """Every attempt failed with a handled exception."""

    def __init__(self, attempts: int, last_error: BaseException):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Gave up after {attempts} attempt(s): {last_error!r}")


def with_retry(
    operation: Callable[[], T],
    policy: RetryPolicy,
    handled_exceptions: Tuple[Type[BaseException], ...] = TRANSIENT_EXCEPTIONS,
    on_retry: Optional[Callable[[int, BaseException], None]] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Run ``operation`` under ``policy``.

    Args:
        operation: Zero-argument callable, invoked fresh on every attempt
        policy: Attempt budget and delay between attempts
        handled_exceptions: Exceptions that trigger another attempt
        on_retry: Called with (failed attempt number, error) before sleeping
        sleep: Delay function

    Returns:
        The first successful result

    Raises:
        RetryExhaustedError: All ``policy.max_attempts`` attempts failed
        Exception: Any unhandled exception, immediately
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return operation()
        except handled_exceptions as e:
            if attempt >= policy.max_attempts:
                raise RetryExhaustedError(attempt, e) from e
            if on_retry is not None:
                on_retry(attempt, e)
            sleep(policy.polling_interval)


class ActionRetrier:
    """
    Retry element actions under a shared policy.

    Example:
        >>> retrier = ActionRetrier(RetryPolicy(max_attempts=3, polling_interval=0.2))
        >>> retrier.do_with_retry(lambda: driver.execute_script("return 1"))
        1
    """

    def __init__(
        self,
        policy: RetryPolicy,
        handled_exceptions: Tuple[Type[BaseException], ...] = TRANSIENT_EXCEPTIONS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.policy = policy
        self.handled_exceptions = handled_exceptions
        self._sleep = sleep

    def do_with_retry(self, operation: Callable[[], T], description: str = "action") -> T:
        def log_retry(attempt: int, error: BaseException) -> None:
            logger.debug(
                f"Retrying '{description}' after {type(error).__name__}: "
                f"attempt {attempt + 1} of {self.policy.max_attempts}"
            )

        return with_retry(
            operation,
            self.policy,
            handled_exceptions=self.handled_exceptions,
            on_retry=log_retry,
            sleep=self._sleep,
        )
