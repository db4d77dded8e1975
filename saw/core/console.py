"""
Console rendering for Saw: colored, bordered five-line blocks.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from colorama import Back, Fore, Style

from ..models import Level, LogRecord
from .effects import Effect
from .pool import BuilderPool, builder_pool


COLOR_RESET = Style.RESET_ALL

LEVEL_COLORS: Dict[Level, str] = {
    Level.DEBUG: Fore.CYAN,
    Level.INFO: Fore.GREEN,
    Level.WARNING: Fore.YELLOW,
    Level.ERROR: Fore.RED,
    Level.FATAL: Fore.MAGENTA,
    Level.PANIC: Back.RED,
}

SEPARATOR = "-" * 64


####
##      CONSOLE FORMATTER
#####
class ConsoleFormatter:
    """
    Renders log records as text blocks and decides their process effect.

    Rendering is pure; nothing here writes to a stream or exits.
    """

    def __init__(self, colors: bool = False, pool: Optional[BuilderPool] = None):
        self.colors = colors
        self.pool = pool or builder_pool

    def color_for(self, level: Union[str, Level]) -> str:
        """
        Pick the color code for a level.

        Returns an empty string when colors are off, and the reset code for
        levels outside the known set.
        """
        if not self.colors:
            return ""

        known = Level.parse(level)
        if known is None:
            return COLOR_RESET
        return LEVEL_COLORS.get(known, COLOR_RESET)

    def format(self, record: LogRecord) -> str:
        """Render the record as five newline-terminated lines."""

        color = self.color_for(record.level)
        reset = COLOR_RESET if self.colors else ""

        lines = (
            SEPARATOR,
            f"Log level: {record.level}",
            f"Log message: {record.message}",
            f"Log time: {record.clock_time}",
            SEPARATOR,
        )

        with self.pool.acquire() as buffer:
            for line in lines:
                buffer.write(f"{color}{line}{reset}\n")
            return buffer.getvalue()

    def effect_for(self, record: LogRecord, output: str) -> Effect:
        """Map a rendered record to the effect its level demands."""

        level = Level.parse(record.level)
        if level is Level.PANIC:
            return Effect.panic(output, message=record.message)
        if level is Level.FATAL:
            return Effect.terminate(1)
        return Effect.proceed()


__all__ = [
    "COLOR_RESET",
    "LEVEL_COLORS",
    "SEPARATOR",
    "ConsoleFormatter",
]
