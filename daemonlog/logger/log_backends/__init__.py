# daemonlog/logger/log_backends/__init__.py
"""
Log backends.

syslog is the primary sink; console is the fallback used when syslog cannot
be opened. Select one via the LOG_BACKEND environment variable.
"""

from .base import LogBackend
from .console_backend import ConsoleBackend
from .syslog_backend import SyslogBackend
from .registry import (
    BackendFactory,
    available_backends,
    create_backend,
    register_backend,
)

__all__ = [
    "LogBackend",
    "ConsoleBackend",
    "SyslogBackend",
    "BackendFactory",
    "available_backends",
    "create_backend",
    "register_backend",
]
