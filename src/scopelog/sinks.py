"""
Log sinks (output destinations).

One logger, up to two sinks: a file it owns and the process stdout it
borrows. Every write is flushed before returning so a line survives a
hard crash of the process.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional

from scopelog.codec import console_mode, from_platform_wide, is_wide
from scopelog.errors import FatalOpenError, WriteError


class LogSink(ABC):
    """Base sink. Receives final rendered text."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text and flush. Raises WriteError on failure."""
        ...

    def flush(self) -> None:
        """Flush buffered output. Override in buffered sinks."""
        pass

    def close(self) -> None:
        """Cleanup. Override if sink holds resources."""
        self.flush()


class FileSink(LogSink):
    """
    Writes UTF-8 text to a file opened in binary mode.
    append=False truncates or creates, append=True preserves content.
    """

    def __init__(self, path: str | Path, append: bool = False, name: str = "file"):
        super().__init__(name)
        self.path = Path(path)
        self.append = append
        try:
            self._file: Optional[IO[bytes]] = open(self.path, "ab" if append else "wb")
        except OSError as exc:
            raise FatalOpenError("Logger.open_file: Can not open log file.") from exc

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, text: str) -> None:
        if self._file is None:
            return
        data = from_platform_wide(text)
        try:
            count = self._file.write(data)
            self._file.flush()
        except OSError as exc:
            raise WriteError("Logger.log_text: Failed write the text to the log file.") from exc
        if count != len(data):
            raise WriteError("Logger.log_text: Failed write the text to the log file.")

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            try:
                self._file.close()
            finally:
                self._file = None


class StdOutSink(LogSink):
    """
    Writes to standard output, or to an explicit stream.

    The stream is borrowed: resolved at write time, never closed.
    Text streams get str, binary streams get UTF-8 bytes.
    """

    def __init__(self, stream: IO | None = None, name: str = "stdout"):
        super().__init__(name)
        self._stream = stream

    @property
    def stream(self) -> IO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        stream = self.stream
        try:
            if is_wide(stream):
                with console_mode(stream):
                    stream.write(text)
                    stream.flush()
            else:
                stream.write(from_platform_wide(text))
                stream.flush()
        except (OSError, ValueError, UnicodeError) as exc:
            # ValueError: closed stream. UnicodeError: stream without reconfigure().
            raise WriteError("Logger.log_text: Failed write the text to the standard output.") from exc

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        # Borrowed stream: nothing to release.
        pass
