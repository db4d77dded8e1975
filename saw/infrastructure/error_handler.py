"""
Panic signal and recovery helpers for Saw.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

from saw.infrastructure.logger import logger


class PanicError(BaseException):
    """
    Raised by a console-path PANIC log.

    Derives from BaseException so that ``except Exception`` does not recover
    it. Callers that want to survive a panic must catch PanicError by name.
    """

    def __init__(self, payload: str, message: str = "", level: str = "PANIC"):
        super().__init__(payload)
        self.payload = payload
        self.message = message
        self.level = level

    def __str__(self) -> str:
        return self.payload


def recover_panic(
    on_panic: Optional[Callable[[PanicError], Any]] = None
) -> Callable:
    """
    Decorator installing a panic recovery handler around a function.

    Args:
        on_panic: Called with the PanicError; its result becomes the
            wrapped function's return value. Defaults to returning None.

    Only PanicError is intercepted; every other exception propagates.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PanicError as err:
                logger.debug(f"Recovered panic in {func.__name__}: {err.message}")
                if on_panic is None:
                    return None
                return on_panic(err)
        return wrapper

    return decorator


__all__ = [
    "PanicError",
    "recover_panic",
]
