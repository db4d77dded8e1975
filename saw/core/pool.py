"""
Thread-safe pool of text buffers used while rendering console output.
"""

from __future__ import annotations

import io
import threading
from contextlib import contextmanager
from typing import Iterator, List


class BuilderPool:
    """
    Reuses ``io.StringIO`` scratch buffers across render calls.

    Buffers are borrowed with ``acquire()``. On every exit from the ``with``
    block, including exceptions, the buffer is emptied and handed back.
    """

    def __init__(self, max_size: int = 32):
        self.max_size = max_size
        self._free: List[io.StringIO] = []
        self._lock = threading.Lock()

    @contextmanager
    def acquire(self) -> Iterator[io.StringIO]:
        with self._lock:
            buffer = self._free.pop() if self._free else io.StringIO()

        try:
            yield buffer
        finally:
            buffer.seek(0)
            buffer.truncate(0)
            with self._lock:
                if len(self._free) < self.max_size:
                    self._free.append(buffer)

    @property
    def available(self) -> int:
        """Number of idle buffers ready for reuse."""

        with self._lock:
            return len(self._free)


builder_pool = BuilderPool()


__all__ = [
    "BuilderPool",
    "builder_pool",
]
