# daemonlog/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class EnvLogLevel(str, Enum):
    """
    Levels for daemonlog's own diagnostics channel.

    Inherits from str so values compare and print as plain strings.

    Examples:
        >>> EnvLogLevel("WARNING").level
        30
        >>> str(EnvLogLevel.DEBUG)
        'DEBUG'
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        return self.value


class EnvLogBackends(str, Enum):
    SYSLOG = "syslog"
    CONSOLE = "console"

    def __str__(self) -> str:
        return self.value


class SyslogFacility(str, Enum):
    """Syslog facilities accepted by SYSLOG_FACILITY."""

    KERN = "kern"
    USER = "user"
    DAEMON = "daemon"
    AUTH = "auth"
    SYSLOG = "syslog"
    LOCAL0 = "local0"
    LOCAL1 = "local1"
    LOCAL2 = "local2"
    LOCAL3 = "local3"
    LOCAL4 = "local4"
    LOCAL5 = "local5"
    LOCAL6 = "local6"
    LOCAL7 = "local7"

    def __str__(self) -> str:
        return self.value


class Severity(str, Enum):
    """
    The eight syslog severities, most to least severe.

    Values double as the method names of every log backend.
    """

    EMERG = "emerg"
    ALERT = "alert"
    CRIT = "crit"
    ERR = "err"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    @property
    def priority(self) -> int:
        """Syslog priority number (0 = emerg, 7 = debug)."""
        return list(Severity).index(self)

    @property
    def is_error(self) -> bool:
        """True for err and anything more severe."""
        return self.priority <= Severity.ERR.priority

    def __str__(self) -> str:
        return self.value


__all__ = [
    "EnvLogLevel",
    "EnvLogBackends",
    "SyslogFacility",
    "Severity",
]
