# daemonlog/errors/__init__.py
from .base_error import DaemonLogError
from .config_error import ConfigurationError
from .log_error import CommandError, LogWriteError

__all__ = [
    "DaemonLogError",
    "ConfigurationError",
    "LogWriteError",
    "CommandError",
]
