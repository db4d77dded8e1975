"""
Public API for Saw: a leveled logger with console and JSON output.

Usage:
    from saw import initialize, SawConfig

    log = initialize().set_config(SawConfig(colors=True))
    log.info("service started")
    payload = log.json.warning("disk at 91%")
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from colorama import just_fix_windows_console

from ..core.console import ConsoleFormatter
from ..core.effects import EffectHandler, ProcessEffectHandler
from ..core.json_log import JsonLog
from ..models import Level, LogRecord, SawConfig

from saw.infrastructure.logger import logger


class Saw:
    """
    Logger writing bordered text blocks to stdout, with a JSON formatter
    available as ``saw.json``.

    Console FATAL writes its block and exits with status 1. Console PANIC
    raises PanicError carrying the block. The JSON formatter has neither
    effect.
    """

    def __init__(
        self,
        config: Optional[SawConfig] = None,
        effects: Optional[EffectHandler] = None,
        verbose: Optional[bool] = None,
    ):
        self.effects = effects or ProcessEffectHandler()
        self.json = JsonLog()
        self.set_config(config or SawConfig())

        # Leave the shared diagnostics level alone unless asked
        self.verbose = bool(verbose)
        if verbose is not None:
            self.set_verbose(verbose)

    @property
    def config(self) -> SawConfig:
        return self._config

    def set_config(self, config: SawConfig) -> "Saw":
        """Replace the whole configuration and return self for chaining."""

        if config.colors:
            just_fix_windows_console()
        self._config = config
        self._formatter = ConsoleFormatter(colors=config.colors)
        logger.debug(f"Configuration replaced: colors={config.colors}")
        return self

    def set_verbose(self, verbose: bool) -> None:
        """Toggle the package diagnostics logger between DEBUG and INFO."""

        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def log(self, level: Union[str, Level], msg: str) -> None:
        """
        Render a record at any level to stdout.

        Unknown levels are accepted and rendered without color.
        """
        record = LogRecord.create(level, msg)
        output = self._formatter.format(record)
        effect = self._formatter.effect_for(record, output)

        if effect.writes_output:
            try:
                sys.stdout.write(output)
            except (OSError, ValueError) as e:
                # Write failures are not reported; FATAL must still exit
                logger.debug(f"Console write failed: {e}")
        self.effects.apply(effect)

    def debug(self, msg: str) -> None:
        self.log(Level.DEBUG, msg)

    def info(self, msg: str) -> None:
        self.log(Level.INFO, msg)

    def warning(self, msg: str) -> None:
        self.log(Level.WARNING, msg)

    def error(self, msg: str) -> None:
        self.log(Level.ERROR, msg)

    def fatal(self, msg: str) -> None:
        """Print a FATAL block and exit the process with status 1."""
        self.log(Level.FATAL, msg)

    def panic(self, msg: str) -> None:
        """Raise PanicError whose payload is the rendered PANIC block."""
        self.log(Level.PANIC, msg)


def initialize() -> Saw:
    """Create a logger with default configuration (colors off)."""

    return Saw()


__all__ = [
    "Saw",
    "initialize",
]
