# daemonlog/logger/__init__.py
from .command import Command
from .log_backends import ConsoleBackend, LogBackend, SyslogBackend
from .logger import (
    FAILED_MARKER,
    FINISHED_MARKER,
    PREFIX_SEPARATOR,
    STARTED_MARKER,
    Logger,
    new_logger,
)

__all__ = [
    "Command",
    "ConsoleBackend",
    "LogBackend",
    "SyslogBackend",
    "Logger",
    "new_logger",
    "PREFIX_SEPARATOR",
    "STARTED_MARKER",
    "FAILED_MARKER",
    "FINISHED_MARKER",
]
