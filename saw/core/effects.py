"""
Process-level effects requested by console log calls.

Rendering decides *which* effect a record carries; an EffectHandler decides
how to perform it. The default handler really exits or raises. Harnesses can
swap in RecordingEffectHandler to observe effects without losing the process.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List

from saw.infrastructure.error_handler import PanicError
from saw.infrastructure.logger import logger


class EffectKind(Enum):
    """What happens after a record is rendered."""

    CONTINUE = "continue"       # Write and return normally
    TERMINATE = "terminate"     # Write, then end the process
    PANIC = "panic"             # Raise PanicError carrying the rendered text


@dataclass(frozen=True)
class Effect:
    """An effect plus the data needed to perform it."""

    kind: EffectKind
    status: int = 0
    payload: str = ""
    message: str = ""

    @classmethod
    def proceed(cls) -> "Effect":
        return cls(EffectKind.CONTINUE)

    @classmethod
    def terminate(cls, status: int = 1) -> "Effect":
        return cls(EffectKind.TERMINATE, status=status)

    @classmethod
    def panic(cls, payload: str, message: str = "") -> "Effect":
        return cls(EffectKind.PANIC, payload=payload, message=message)

    @property
    def writes_output(self) -> bool:
        """Panics carry their text in the signal instead of printing it."""

        return self.kind is not EffectKind.PANIC


class EffectHandler:
    """Performs effects produced by the console formatter."""

    def apply(self, effect: Effect) -> None:
        raise NotImplementedError


class ProcessEffectHandler(EffectHandler):
    """Performs effects for real: exits the process or raises PanicError."""

    def apply(self, effect: Effect) -> None:
        if effect.kind is EffectKind.TERMINATE:
            logger.debug(f"Fatal log, exiting with status {effect.status}")
            for stream in (sys.stdout, sys.stderr):
                try:
                    stream.flush()
                except (OSError, ValueError) as e:
                    logger.debug(f"Flush before exit failed: {e}")
            # Skips finally blocks and atexit hooks, like an immediate exit
            os._exit(effect.status)

        if effect.kind is EffectKind.PANIC:
            logger.debug("Panic log, raising PanicError")
            raise PanicError(effect.payload, message=effect.message)


class RecordingEffectHandler(EffectHandler):
    """Collects effects instead of performing them."""

    def __init__(self):
        self.effects: List[Effect] = []

    def apply(self, effect: Effect) -> None:
        self.effects.append(effect)

    @property
    def kinds(self) -> List[EffectKind]:
        return [effect.kind for effect in self.effects]


__all__ = [
    "EffectKind",
    "Effect",
    "EffectHandler",
    "ProcessEffectHandler",
    "RecordingEffectHandler",
]
