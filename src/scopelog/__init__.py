"""
scopelog: embeddable categorized logger.

File and stdout sinks, per-category toggles, optional timestamps,
scoped Enter/Exit tracing and a fatal path that logs, calls a hook and
terminates the process.
"""

from scopelog.core import Logger
from scopelog.records import Category, LogEntry, Option
from scopelog.sinks import LogSink, FileSink, StdOutSink
from scopelog.gate import CategoryGate
from scopelog.formatters import MessageFormatter, EntryFormatter, format_timestamp
from scopelog.tracker import Tracker, traced
from scopelog.fatal import EXIT_FAILURE, FatalPath, LoggerState
from scopelog.config import LoggerConfig, FileSinkConfig
from scopelog.errors import (
    LoggerError,
    FatalOpenError,
    WriteError,
    FormatError,
    CodecError,
)

__version__ = "2.0.0"

__all__ = [
    "Logger",
    "Category",
    "LogEntry",
    "Option",
    "LogSink",
    "FileSink",
    "StdOutSink",
    "CategoryGate",
    "MessageFormatter",
    "EntryFormatter",
    "format_timestamp",
    "Tracker",
    "traced",
    "EXIT_FAILURE",
    "FatalPath",
    "LoggerState",
    "LoggerConfig",
    "FileSinkConfig",
    "LoggerError",
    "FatalOpenError",
    "WriteError",
    "FormatError",
    "CodecError",
]
