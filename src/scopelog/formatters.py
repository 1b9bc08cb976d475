"""
Formatters.

MessageFormatter expands a template plus arguments into message text.
EntryFormatter turns a LogEntry into the exact line written to sinks:

  - plain:  "[<Category>]: <message>\\n"
  - trace:  "[Trace][<function>]: <message>\\n"
  - time:   "[YYYY/MM/DD HH:MM:SS]" immediately before the tag
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from scopelog.codec import from_platform_wide
from scopelog.errors import CodecError, FormatError
from scopelog.records import Category, LogEntry

WRONG_FORMAT = "[Inner Fatal Error][Logger.log_text]: Wrong format."
WRONG_ENCODING = "[Inner Fatal Error][Logger.log_text]: Wrong encoding."


class MessageFormatter:
    """
    printf-style rendering with Python's % operator.

    No arguments: the template is the message, verbatim.
    One mapping argument: named placeholders, e.g. "%(name)s".
    Otherwise: positional placeholders, e.g. "%s %d.".
    """

    def render(self, template: str, *args: Any) -> str:
        if not args:
            message = template
        else:
            values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
            try:
                message = template % values
            except (TypeError, ValueError, KeyError) as exc:
                raise FormatError(WRONG_FORMAT) from exc

        try:
            from_platform_wide(message)
        except CodecError as exc:
            raise FormatError(WRONG_ENCODING) from exc
        return message


class EntryFormatter:
    """LogEntry → line, newline included."""

    def format(self, entry: LogEntry) -> str:
        parts = []
        if entry.timestamp is not None:
            parts.append(format_timestamp(entry.timestamp))
        if entry.category is Category.TRACE:
            parts.append(f"[{entry.category.value}][{entry.function_name}]: ")
        else:
            parts.append(f"[{entry.category.value}]: ")
        parts.append(entry.message)
        parts.append("\n")
        return "".join(parts)


def format_timestamp(moment: datetime | None = None) -> str:
    """Local wall-clock time as "[YYYY/MM/DD HH:MM:SS]"."""
    moment = moment or datetime.now()
    return moment.strftime("[%Y/%m/%d %H:%M:%S]")
