"""
Categories, gate options and log entries.

Categories name the tag written in front of every entry. Options are the
per-category toggles of the gate, plus TIME which controls timestamps.
ERROR and FATAL_ERROR have no option: they are never gated.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Option(str, Enum):
    """Gate flags. Values are the config names."""
    TIME = "time"
    TRACE = "trace"
    DUMP = "dump"
    EVENT = "event"
    WARNING = "warning"

    @classmethod
    def from_name(cls, name: str) -> "Option":
        """Resolve option from string name, case-insensitive."""
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(
                f"Unknown logger option '{name}'. "
                f"Valid options: {', '.join(m.value for m in cls)}"
            )


# TIME off, every category on
DEFAULT_OPTIONS: dict[Option, bool] = {
    Option.TIME: False,
    Option.TRACE: True,
    Option.DUMP: True,
    Option.EVENT: True,
    Option.WARNING: True,
}


class Category(str, Enum):
    """Entry categories. Values are the exact tag text."""
    TRACE = "Trace"
    DUMP = "Dump"
    EVENT = "Event"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL_ERROR = "Fatal Error"

    @property
    def option(self) -> Optional[Option]:
        """Gate option controlling this category, None if never gated."""
        return _CATEGORY_OPTIONS.get(self)


_CATEGORY_OPTIONS: dict[Category, Option] = {
    Category.TRACE: Option.TRACE,
    Category.DUMP: Option.DUMP,
    Category.EVENT: Option.EVENT,
    Category.WARNING: Option.WARNING,
}


@dataclass(frozen=True)
class LogEntry:
    """
    Immutable tagged entry. Created by Logger after the gate passes,
    rendered to a line by EntryFormatter.

    timestamp is local wall-clock time, or None when TIME is off.
    function_name is only set for TRACE entries.
    """
    category: Category
    message: str
    function_name: Optional[str] = None
    timestamp: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        category: Category,
        message: str,
        function_name: str | None = None,
        stamped: bool = False,
    ) -> "LogEntry":
        """Factory stamping local time at call time when requested."""
        return cls(
            category=category,
            message=message,
            function_name=function_name,
            timestamp=datetime.now() if stamped else None,
        )
