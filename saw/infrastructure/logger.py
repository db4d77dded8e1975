"""
Package diagnostics logger.

Saw's own diagnostics go through the standard library logger named ``saw``.
Only a NullHandler is attached; applications decide where the records go.
"""

import logging


logger = logging.getLogger("saw")
logger.addHandler(logging.NullHandler())


__all__ = [
    "logger",
]
