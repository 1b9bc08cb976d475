"""
Fatal path.

Log, call the user hook, terminate. State machine:

    NORMAL ──fatal event──▶ FATAL ──terminate()──▶ TERMINATED

The hook runs at most once. A second fatal event raised while the first
is being handled (e.g. from inside the hook) skips the hook and goes
straight to termination.
"""

import os
import sys
from enum import Enum
from typing import Callable, NoReturn, Optional

EXIT_FAILURE = 1

FatalHook = Callable[[str], None]
Terminator = Callable[[int], NoReturn]


class LoggerState(str, Enum):
    NORMAL = "normal"
    FATAL = "fatal"
    TERMINATED = "terminated"


def terminate(status: int = EXIT_FAILURE) -> NoReturn:
    """
    End the process now. os._exit, not sys.exit: SystemExit can be caught,
    and no statement after a fatal call may run.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            if stream is not None:
                stream.flush()
        except (OSError, ValueError):
            pass
    os._exit(status)


class FatalPath:
    """
    Drives the NORMAL → FATAL → TERMINATED transition for one logger.

    Usage:
        path = FatalPath()
        path.hook = lambda message: cleanup(message)
        path.run("boom.")              # hook("boom."), then exit(1)
    """

    def __init__(self, terminator: Optional[Terminator] = None):
        self.hook: Optional[FatalHook] = None
        self._terminator: Terminator = terminator or terminate
        self._state = LoggerState.NORMAL

    @property
    def state(self) -> LoggerState:
        return self._state

    def run(self, message: str, status: int = EXIT_FAILURE) -> NoReturn:
        """Invoke the hook with message (first event only), then terminate."""
        if self._state is LoggerState.NORMAL:
            self._state = LoggerState.FATAL
            if self.hook is not None:
                try:
                    self.hook(message)
                finally:
                    self._finish(status)
        self._finish(status)

    def _finish(self, status: int) -> NoReturn:
        self._state = LoggerState.TERMINATED
        self._terminator(status)
        # Injected terminators must not return.
        raise SystemExit(status)
