"""
Configuration models for Saw.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SawConfig:
    """
    Logger configuration.

    Replaced as a whole by ``Saw.set_config``; there is no partial update.
    """

    # Wrap console output in ANSI color codes selected by level
    colors: bool = False


__all__ = [
    "SawConfig",
]
