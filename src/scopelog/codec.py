"""
Text codec.

Narrow interface the logger uses to move text between UTF-8 bytes and
Python str, and to adjust a console stream's error handling for the span
of a single write.
"""

import io
from contextlib import contextmanager
from typing import IO, Iterator

from scopelog.errors import CodecError

ENCODING = "utf-8"
CONSOLE_ERRORS = "backslashreplace"


def to_platform_wide(data: bytes) -> str:
    """Decode UTF-8 bytes to str."""
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise CodecError("Logger.to_platform_wide: Can not convert a text from utf-8.") from exc


def from_platform_wide(text: str) -> bytes:
    """Encode str to UTF-8 bytes. Lone surrogates are rejected."""
    try:
        return text.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise CodecError("Logger.from_platform_wide: Can not convert a text to utf-8.") from exc


def is_wide(stream: IO) -> bool:
    """True for text streams (take str), False for binary ones (take bytes)."""
    return not isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


@contextmanager
def console_mode(stream: IO, errors: str = CONSOLE_ERRORS) -> Iterator[IO]:
    """
    Switch a text stream's error handler for one write, then restore it.

    Characters the console encoding cannot represent are escaped instead of
    raising. Streams without reconfigure() are used as they are.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    previous = getattr(stream, "errors", None)
    if reconfigure is None or previous is None or previous == errors:
        yield stream
        return

    reconfigure(errors=errors)
    try:
        yield stream
    finally:
        reconfigure(errors=previous)
