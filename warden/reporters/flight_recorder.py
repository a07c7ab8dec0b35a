"""
Flight Recorder - Structured record of element actions.

Captures every localized log call as a structured entry so a run can be
inspected after the fact (or asserted on in tests) without parsing text.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime
import json
import os


@dataclass
class LogEntry:
    """A single log entry in the flight record."""
    timestamp: datetime
    level: str  # 'debug', 'info', 'warning', 'error'
    message_key: str
    message: str
    args: List[Any] = field(default_factory=list)
    element_type: Optional[str] = None
    element_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level,
            "message_key": self.message_key,
            "message": self.message,
            "args": [_jsonable(arg) for arg in self.args],
            "element_type": self.element_type,
            "element_name": self.element_name,
        }


class FlightRecorder:
    """
    Records what the engine did, in order.

    Example:
        >>> recorder = FlightRecorder()
        >>> logger = LocalizedLogger(LocalizationManager(), recorder=recorder)
        >>> label.js_actions.get_element_text()
        >>> recorder.keys()
        [['loc.get.text.js'], ['loc.text.value', 'Hello']]
    """

    def __init__(self, run_name: Optional[str] = None):
        self.run_name = run_name or datetime.now().strftime("%Y%m%d_%H%M%S")
        self.entries: List[LogEntry] = []
        self.metadata: Dict[str, Any] = {
            "start_time": datetime.now().isoformat(),
            "run_name": self.run_name,
        }

    def record(
        self,
        level: str,
        message_key: str,
        message: str,
        args: Optional[List[Any]] = None,
        element_type: Optional[str] = None,
        element_name: Optional[str] = None,
    ) -> LogEntry:
        entry = LogEntry(
            timestamp=datetime.now(),
            level=level,
            message_key=message_key,
            message=message,
            args=list(args or []),
            element_type=element_type,
            element_name=element_name,
        )
        self.entries.append(entry)
        return entry

    def keys(self) -> List[List[Any]]:
        """Message keys with their arguments, one list per entry."""
        return [[entry.message_key, *entry.args] for entry in self.entries]

    def for_element(self, element_name: str) -> List[LogEntry]:
        """Entries logged against one element."""
        return [entry for entry in self.entries if entry.element_name == element_name]

    def clear(self) -> None:
        self.entries.clear()

    def save(self, path: str) -> str:
        """
        Write the record as JSON.

        Args:
            path: Target file; parent directories are created

        Returns:
            Path to the written file
        """
        self.metadata["end_time"] = datetime.now().isoformat()
        self.metadata["total_entries"] = len(self.entries)

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump({
                "metadata": self.metadata,
                "entries": [entry.to_dict() for entry in self.entries],
            }, f, indent=2, ensure_ascii=False)

        return path


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return str(value)
