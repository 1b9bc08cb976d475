"""
Exception taxonomy.

Components raise these; the Logger catches them at its boundary and sends
them down the fatal path. Callers never see them as recoverable errors.
"""


class LoggerError(Exception):
    """Base class for logger infrastructure failures."""


class FatalOpenError(LoggerError):
    """Log file could not be opened or created."""


class WriteError(LoggerError):
    """Short write or I/O failure on a sink."""


class FormatError(LoggerError):
    """Message template could not be rendered."""


class CodecError(LoggerError):
    """Text could not be converted between UTF-8 and str."""
