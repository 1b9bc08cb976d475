"""
Logger: embeddable categorized logger.

One instance per use site, no hidden global. Sinks, gate and fatal hook
all live on the instance and its lifecycle is entirely the caller's.

Call flow for a tagged entry:
    gate check → render message → build LogEntry → format line → fan out
    to the file sink, then stdout

A closed gate returns before any rendering. Error and Fatal Error are
never gated.

Not thread-safe. There is no internal locking: a Logger shared between
threads must be serialized by the caller (or use one Logger per thread).
"""

import sys
from pathlib import Path
from typing import Any, Callable, NoReturn, Optional

from scopelog.config import LoggerConfig
from scopelog.errors import FormatError, LoggerError
from scopelog.fatal import EXIT_FAILURE, FatalHook, FatalPath, LoggerState, Terminator
from scopelog.formatters import EntryFormatter, MessageFormatter
from scopelog.gate import CategoryGate
from scopelog.records import Category, LogEntry, Option
from scopelog.sinks import FileSink, StdOutSink
from scopelog.tracker import Tracker, traced as _traced


class Logger:
    """
    Usage:
        log = Logger()
        log.open_file("log.txt", append=False)
        log.open_stdout()
        log.log_text("=== Logs ===\\n")
        log.log_event("Connected to %s:%d.", host, port)
        log.log_error("%s %d.", "Error", 6)       # [Error]: Error 6.

        with log.track("load"):                    # [Trace][load]: Enter.
            ...                                    # [Trace][load]: Exit.

        log.set_do_at_fatal_error(lambda msg: cleanup(msg))
        log.log_fatal_error("%s.", "boom")         # hook("boom."), exit(1)
    """

    def __init__(
        self,
        stdout: Any = None,
        terminate: Optional[Terminator] = None,
    ) -> None:
        self._file_sink: Optional[FileSink] = None
        self._stdout_sink = StdOutSink(stdout)
        self._stdout_enabled = False
        self._gate = CategoryGate()
        self._formatter = MessageFormatter()
        self._entry_formatter = EntryFormatter()
        self._fatal = FatalPath(terminate)

    @classmethod
    def from_config(cls, config: LoggerConfig | dict, **kwargs: Any) -> "Logger":
        """Create a logger and apply configuration to it."""
        logger = cls(**kwargs)
        logger.configure(config)
        return logger

    # ── Configuration ─────────────────────────────────────────────

    def configure(self, config: LoggerConfig | dict) -> None:
        """
        Apply sinks and options from a LoggerConfig or dict (parsed YAML).

            file: {path: logs/app.log, append: true}
            stdout: true
            options: {time: true, trace: false}

        Absent keys leave the current state alone.
        """
        if not isinstance(config, LoggerConfig):
            config = LoggerConfig.from_dict(config)

        if config.file is not None:
            self.open_file(config.file.path, config.file.append)

        if config.stdout is True:
            self.open_stdout()
        elif config.stdout is False:
            self.close_stdout()

        for name, value in (config.options or {}).items():
            self._gate.set_option(name, value)

    # ── Sink Management ───────────────────────────────────────────

    def open_file(self, path: str | Path, append: bool = False) -> None:
        """
        Open a log file, replacing any file already open.
        Failure to open is fatal: the process terminates.
        """
        self.close_file()
        try:
            self._file_sink = FileSink(path, append)
        except LoggerError as exc:
            self._inner_fatal_error(str(exc))

    def close_file(self) -> None:
        """Flush and close the log file. No-op if none is open."""
        sink, self._file_sink = self._file_sink, None
        if sink is not None:
            sink.close()

    def is_file_opened(self) -> bool:
        return self._file_sink is not None

    def open_stdout(self) -> None:
        self._stdout_enabled = True

    def close_stdout(self) -> None:
        self._stdout_enabled = False

    def is_stdout_opened(self) -> bool:
        return self._stdout_enabled

    # ── Fatal Hook ────────────────────────────────────────────────

    def set_do_at_fatal_error(self, hook: Optional[FatalHook]) -> None:
        """Register a callable(message) run before termination. None clears it."""
        self._fatal.hook = hook

    @property
    def state(self) -> LoggerState:
        return self._fatal.state

    # ── Category Gate ─────────────────────────────────────────────

    def enable(self, option: Option | Category | str) -> None:
        self._gate.enable(option)

    def disable(self, option: Option | Category | str) -> None:
        self._gate.disable(option)

    def set_option(self, option: Option | Category | str, value: bool) -> None:
        self._gate.set_option(option, value)

    def is_enabled(self, option: Option | Category | str) -> bool:
        return self._gate.is_enabled(option)

    # ── Logging ───────────────────────────────────────────────────

    def log_text(self, text: str, *args: Any) -> None:
        """
        Write text as is: no tag, no timestamp, no newline, no gate.
        With arguments, text is a template rendered first.
        """
        if args:
            text = self._render(text, *args)
        self._write(text)

    def log_trace(self, function_name: str, template: str, *args: Any) -> None:
        self._log_entry(Category.TRACE, template, args, function_name)

    def trace(self, template: str, *args: Any) -> None:
        """log_trace() named after the calling function."""
        self._log_entry(Category.TRACE, template, args, _caller_name())

    def log_dump(self, template: str, *args: Any) -> None:
        self._log_entry(Category.DUMP, template, args)

    def log_event(self, template: str, *args: Any) -> None:
        self._log_entry(Category.EVENT, template, args)

    def log_warning(self, template: str, *args: Any) -> None:
        self._log_entry(Category.WARNING, template, args)

    def log_error(self, template: str, *args: Any) -> None:
        self._log_entry(Category.ERROR, template, args)

    def log_fatal_error(self, template: str, *args: Any) -> NoReturn:
        """
        Log "[Fatal Error]: <message>", call the fatal hook with the
        message, terminate the process. Never returns.
        """
        message = self._log_entry(Category.FATAL_ERROR, template, args)
        self._fatal.run(message, EXIT_FAILURE)

    # ── Scope Tracking ────────────────────────────────────────────

    def track(self, function_name: str | None = None) -> Tracker:
        """
        Scope guard logging Enter./Exit. for a with-block.
        Defaults to the calling function's name.
        """
        return Tracker(self, function_name or _caller_name())

    def traced(self, func: Callable | None = None, *, function_name: str | None = None):
        """
        Decorator form of track(): @log.traced or @log.traced(function_name="x").
        """
        decorator = _traced(self, function_name)
        if func is not None:
            return decorator(func)
        return decorator

    # ── Status ────────────────────────────────────────────────────

    def status(self) -> dict:
        """Current logger state for display."""
        sink = self._file_sink
        return {
            "state": self._fatal.state.value,
            "file": {"path": str(sink.path), "append": sink.append} if sink else None,
            "stdout": self._stdout_enabled,
            "options": self._gate.describe(),
            "fatal_hook": self._fatal.hook is not None,
        }

    # ── Cleanup ───────────────────────────────────────────────────

    def close(self) -> None:
        """Close the file sink and stop writing to stdout."""
        self.close_file()
        self.close_stdout()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_file_sink", None) is not None:
            self.close_file()

    # ── Internals ─────────────────────────────────────────────────

    def _log_entry(
        self,
        category: Category,
        template: str,
        args: tuple,
        function_name: str | None = None,
    ) -> Optional[str]:
        """Gate, render, format, write. Returns the message, None if gated out."""
        if not self._gate.allows(category):
            return None

        message = self._render(template, *args)
        entry = LogEntry.create(
            category=category,
            message=message,
            function_name=function_name,
            stamped=self._gate.log_time,
        )
        self._write(self._entry_formatter.format(entry))
        return message

    def _render(self, template: str, *args: Any) -> str:
        try:
            return self._formatter.render(template, *args)
        except FormatError as exc:
            self._inner_fatal_error(str(exc))

    def _write(self, text: str) -> None:
        """Fan text out to every active sink."""
        try:
            if self._file_sink is not None:
                self._file_sink.write(text)
            if self._stdout_enabled:
                self._stdout_sink.write(text)
        except LoggerError as exc:
            self._inner_fatal_error(str(exc))

    def _inner_fatal_error(self, message: str) -> NoReturn:
        """
        Logger infrastructure failure. Best-effort raw diagnostic to the
        console (stdout if open, else stderr), then the fatal path.
        Skips gate and timestamp: the logger's own state may be broken.
        """
        try:
            self._write_diagnostic(message + "\n")
        finally:
            self._fatal.run(message, EXIT_FAILURE)

    def _write_diagnostic(self, text: str) -> None:
        """First console that accepts the text wins; stderr is the fallback."""
        consoles = [self._stdout_sink] if self._stdout_enabled else []
        consoles.append(StdOutSink(sys.stderr, name="stderr"))
        for console in consoles:
            try:
                console.write(text)
                return
            except LoggerError:
                continue


def _caller_name() -> str:
    """Name of the function two frames up (the caller of the Logger method)."""
    return sys._getframe(2).f_code.co_name
