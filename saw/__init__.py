"""
Saw: leveled logging to colored console blocks or compact JSON.
"""

from .models import Level, LogRecord, SawConfig
from .core.effects import (
    Effect,
    EffectKind,
    EffectHandler,
    ProcessEffectHandler,
    RecordingEffectHandler,
)
from .core.json_log import JsonLog
from .infrastructure.error_handler import PanicError, recover_panic
from .interfaces.api import Saw, initialize

__all__ = [
    # Models
    "Level",
    "LogRecord",
    "SawConfig",
    # Effects
    "Effect",
    "EffectKind",
    "EffectHandler",
    "ProcessEffectHandler",
    "RecordingEffectHandler",
    # Formatters
    "JsonLog",
    # Errors
    "PanicError",
    "recover_panic",
    # Entry points
    "Saw",
    "initialize",
]
