"""
Core data models API surface for Saw.

Re-exports model classes so callers can write `from saw.models import X`.
"""

from .logging import (
    Level,
    LogRecord,
)
from .config import SawConfig

__all__ = [
    # Record models
    "Level",
    "LogRecord",
    # Config models
    "SawConfig",
]
