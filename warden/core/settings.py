"""
Settings - JSON configuration with environment overrides.

Values are addressed by a dotted path (".timeouts.timeoutCondition").
An environment variable named after the path (without the leading dot,
tried as-is, lower-case and upper-case) always wins over the JSON value.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar
import copy
import json
import logging
import os

from warden.core.errors import SettingsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}

DEFAULT_SETTINGS: Dict[str, Any] = {
    "browserName": "chrome",
    "browserProfile": {
        "isHeadless": False,
        "isElementHighlightEnabled": False,
    },
    "timeouts": {
        "timeoutCondition": 15,
        "timeoutPageLoad": 30,
        "timeoutPollingInterval": 300,
    },
    "retry": {
        "maxAttempts": 3,
        "pollingInterval": 300,
    },
    "logger": {
        "language": "en",
    },
}


class JsonSettings:
    """
    Read typed values from a JSON document.

    Example:
        >>> settings = JsonSettings.defaults()
        >>> settings.get(".retry.maxAttempts", int)
        3
    """

    def __init__(self, content: Dict[str, Any], source_name: str = "<memory>"):
        self.content = content
        self.source_name = source_name

    @classmethod
    def from_file(cls, path: str) -> "JsonSettings":
        """Load settings from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Failed to read settings file {path}: {e}") from e
        return cls(content, source_name=os.path.basename(path))

    @classmethod
    def defaults(cls) -> "JsonSettings":
        """Settings built from the bundled defaults."""
        return cls(copy.deepcopy(DEFAULT_SETTINGS), source_name="defaults")

    def get_value(self, path: str) -> Any:
        """
        Get a raw value, preferring the environment.

        Args:
            path: Dotted path to the value

        Returns:
            The environment string if set, otherwise the JSON node
            with its native type.
        """
        env_value = self._get_environment_value(path)
        if env_value is not None:
            logger.debug(f"***** Using variable passed from environment {_env_key(path)}={env_value}")
            return env_value

        node = self._get_json_node(path)
        if node is _MISSING:
            raise SettingsError(f"Failed to get value by path {path} from {self.source_name}")
        return node

    def get(self, path: str, type_: Callable[[Any], T]) -> T:
        """Get a value coerced to ``type_``."""
        value = self.get_value(path)
        try:
            return _coerce(value, type_)
        except (TypeError, ValueError) as e:
            raise SettingsError(
                f"Value {value!r} at {path} from {self.source_name} "
                f"cannot be read as {getattr(type_, '__name__', type_)}"
            ) from e

    def get_or_default(self, path: str, default: T, type_: Optional[Callable[[Any], T]] = None) -> T:
        """Get a value or fall back to ``default`` when it is absent."""
        if not self.is_value_present(path):
            return default
        return self.get(path, type_ or type(default))

    def is_value_present(self, path: str) -> bool:
        """Check whether the path resolves in the environment or JSON."""
        return self._get_environment_value(path) is not None or self._get_json_node(path) is not _MISSING

    def _get_environment_value(self, path: str) -> Optional[str]:
        key = _env_key(path)
        for candidate in (key, key.lower(), key.upper()):
            value = os.environ.get(candidate)
            if value is not None:
                return value
        return None

    def _get_json_node(self, path: str) -> Any:
        node: Any = self.content
        for part in _env_key(path).split("."):
            if not part:
                continue
            if isinstance(node, dict) and part in node:
                node = node[part]
            elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return _MISSING
        return node


def _env_key(path: str) -> str:
    return path.lstrip("$").lstrip(".")


def _coerce(value: Any, type_: Callable[[Any], T]) -> T:
    if type_ is bool:
        if isinstance(value, bool):
            return value  # type: ignore[return-value]
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True  # type: ignore[return-value]
        if text in _FALSE_STRINGS:
            return False  # type: ignore[return-value]
        raise ValueError(f"not a boolean: {value!r}")
    if type_ is int and isinstance(value, str):
        return int(float(value))  # type: ignore[return-value]
    return type_(value)


@dataclass(frozen=True)
class BrowserProfile:
    """Browser options read at action time."""
    browser_name: str = "chrome"
    is_headless: bool = False
    is_element_highlight_enabled: bool = False

    @classmethod
    def from_settings(cls, settings: JsonSettings) -> "BrowserProfile":
        return cls(
            browser_name=settings.get_or_default(".browserName", "chrome"),
            is_headless=settings.get_or_default(".browserProfile.isHeadless", False),
            is_element_highlight_enabled=settings.get_or_default(
                ".browserProfile.isElementHighlightEnabled", False
            ),
        )


@dataclass(frozen=True)
class RetryPolicy:
    """How long a transient action failure is tolerated."""
    max_attempts: int = 3
    polling_interval: float = 0.3  # seconds

    def __post_init__(self):
        if self.max_attempts < 1:
            raise SettingsError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.polling_interval < 0:
            raise SettingsError(f"polling_interval must not be negative, got {self.polling_interval}")

    @classmethod
    def from_settings(cls, settings: JsonSettings) -> "RetryPolicy":
        return cls(
            max_attempts=settings.get_or_default(".retry.maxAttempts", 3),
            polling_interval=settings.get_or_default(".retry.pollingInterval", 300, int) / 1000,
        )


@dataclass(frozen=True)
class Timeouts:
    """Wait budgets, all in seconds."""
    condition: float = 15
    page_load: float = 30
    polling_interval: float = 0.3

    @classmethod
    def from_settings(cls, settings: JsonSettings) -> "Timeouts":
        return cls(
            condition=settings.get_or_default(".timeouts.timeoutCondition", 15.0, float),
            page_load=settings.get_or_default(".timeouts.timeoutPageLoad", 30.0, float),
            polling_interval=settings.get_or_default(".timeouts.timeoutPollingInterval", 300, int) / 1000,
        )
