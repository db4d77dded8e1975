"""
Log record and severity level models for Saw.

A record is the unit both the console and JSON formatters render. Levels are
kept as open strings on the record; ``Level`` is the closed set used only for
lookups such as color selection and effect dispatch.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union


class Level(str, Enum):
    """Known severity tags. Unordered; not a filtering threshold."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"
    PANIC = "PANIC"

    @classmethod
    def parse(cls, value: Union[str, "Level"]) -> Optional["Level"]:
        """Return the matching member, or None for an unrecognized tag."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def _now() -> int:
    return int(time.time())


@dataclass
class LogRecord:
    """A single log event."""

    level: str
    message: str
    timestamp: int = field(default_factory=_now)

    @classmethod
    def create(cls, level: Union[str, Level], message: str) -> "LogRecord":
        """Build a record stamped with the current time."""

        if isinstance(level, Level):
            level = level.value
        return cls(level=level, message=message, timestamp=_now())

    @property
    def clock_time(self) -> str:
        """Timestamp as local wall-clock ``HH:MM:SS``."""

        return datetime.fromtimestamp(self.timestamp).strftime("%H:%M:%S")

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, keys in output order."""

        return {
            "Lvl": self.level,
            "Msg": self.message,
            "Time": self.timestamp,
        }


__all__ = [
    "Level",
    "LogRecord",
]
