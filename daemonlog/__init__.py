# daemonlog/__init__.py
"""
Priority-leveled logging facade for infrastructure daemons.

Usage:
    from daemonlog import new_logger

    logger = new_logger()          # syslog, or the console if syslog is down
    with logger.prefix("network"):
        logger.info("bringing up %s", "eth0")
    logger.close()
"""

from .config import Severity
from .errors import CommandError, ConfigurationError, DaemonLogError, LogWriteError
from .logger import Command, ConsoleBackend, LogBackend, Logger, SyslogBackend, new_logger

__version__ = "0.1.0"

__all__ = [
    "Severity",
    "Command",
    "ConsoleBackend",
    "LogBackend",
    "Logger",
    "SyslogBackend",
    "new_logger",
    "DaemonLogError",
    "ConfigurationError",
    "LogWriteError",
    "CommandError",
]
