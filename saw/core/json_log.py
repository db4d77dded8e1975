"""
JSON rendering for Saw.

Every call returns bytes and nothing else: no writes, no exits, no panics,
whatever the level.
"""

from __future__ import annotations

import json
from typing import Union

from ..models import Level, LogRecord
from saw.infrastructure.logger import logger


class JsonLog:
    """Formats log records as compact JSON objects."""

    def log(self, level: Union[str, Level], msg: str) -> bytes:
        return self.encode(LogRecord.create(level, msg))

    @staticmethod
    def encode(record: LogRecord) -> bytes:
        """
        Serialize a record.

        Falls back to ``{"error": "..."}`` when the record cannot be
        serialized; callers never see an exception.
        """
        try:
            text = json.dumps(
                record.to_dict(), ensure_ascii=False, separators=(",", ":")
            )
            return text.encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.warning(f"JSON serialization failed for {record.level} record: {e}")
            return json.dumps({"error": str(e)}).encode("utf-8")

    def debug(self, msg: str) -> bytes:
        return self.log(Level.DEBUG, msg)

    def info(self, msg: str) -> bytes:
        return self.log(Level.INFO, msg)

    def warning(self, msg: str) -> bytes:
        return self.log(Level.WARNING, msg)

    def error(self, msg: str) -> bytes:
        return self.log(Level.ERROR, msg)

    def fatal(self, msg: str) -> bytes:
        """Serialize a FATAL record. Does not exit."""
        return self.log(Level.FATAL, msg)

    def panic(self, msg: str) -> bytes:
        """Serialize a PANIC record. Does not raise."""
        return self.log(Level.PANIC, msg)


__all__ = [
    "JsonLog",
]
