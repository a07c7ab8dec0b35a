"""
Localized Logger - Element action logging by message key.

Wraps the standard ``logging`` module: every call renders its message
key through the LocalizationManager and, when a FlightRecorder is
attached, also records the key and arguments as a structured entry.
Logging never fails the action being logged.
"""

from typing import Any, Optional
import logging

from warden.reporters.flight_recorder import FlightRecorder
from warden.reporters.localization import LocalizationManager

logger = logging.getLogger("warden")


class LocalizedLogger:
    """
    Log element actions by message key.

    Example:
        >>> log = LocalizedLogger(LocalizationManager("en"))
        >>> log.info_element_action("Button", "Submit", "loc.clicking.js")
        # INFO warden: Button 'Submit' :: Clicking by JavaScript
    """

    def __init__(
        self,
        localization: Optional[LocalizationManager] = None,
        recorder: Optional[FlightRecorder] = None,
    ):
        self.localization = localization or LocalizationManager()
        self.recorder = recorder

    def info_element_action(self, element_type: str, element_name: str, message_key: str, *args: Any) -> None:
        """Log an action performed on a named element."""
        message = self.localization.get_localized_message(message_key, *args)
        logger.info(f"{element_type} '{element_name}' :: {message}")
        if self.recorder is not None:
            self.recorder.record(
                "info", message_key, message, list(args),
                element_type=element_type, element_name=element_name,
            )

    def debug(self, message_key: str, *args: Any) -> None:
        self._log(logging.DEBUG, "debug", message_key, args)

    def info(self, message_key: str, *args: Any) -> None:
        self._log(logging.INFO, "info", message_key, args)

    def _log(self, level: int, level_name: str, message_key: str, args: tuple) -> None:
        message = self.localization.get_localized_message(message_key, *args)
        logger.log(level, message)
        if self.recorder is not None:
            self.recorder.record(level_name, message_key, message, list(args))
