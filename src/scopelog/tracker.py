"""
Scope tracker.

Pairs a "[Trace][<function>]: Enter." line with an "Exit." line bound to a
with-block, so the exit line is written on every way out of the block:
normal end, early return, or an exception passing through.

Usage:
    def load(path):
        with Tracker(log, "load"):
            if not path:
                return None        # Exit. still logged
            ...

    @log.traced
    def save(data): ...
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from scopelog.core import Logger

F = TypeVar("F", bound=Callable[..., Any])

ENTER_MESSAGE = "Enter."
EXIT_MESSAGE = "Exit."


class Tracker:
    """Borrowed logger and function name; owns nothing."""

    def __init__(self, logger: Logger, function_name: str):
        self._logger = logger
        self.function_name = function_name
        self._entered = False

    def __enter__(self) -> "Tracker":
        self._logger.log_trace(self.function_name, ENTER_MESSAGE)
        self._entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._entered:
            self._entered = False
            self._logger.log_trace(self.function_name, EXIT_MESSAGE)
        # Never swallow the exception.
        return False


def traced(logger: Logger, function_name: str | None = None) -> Callable[[F], F]:
    """Decorator: run the wrapped function inside a Tracker."""

    def decorator(func: F) -> F:
        name = function_name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with Tracker(logger, name):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
