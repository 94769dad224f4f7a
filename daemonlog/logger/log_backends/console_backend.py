# daemonlog/logger/log_backends/console_backend.py
"""Console backend used when the system log is unavailable."""
import sys
from typing import Optional, TextIO

from daemonlog.config import Severity, SyslogConfig
from daemonlog.errors import LogWriteError


class ConsoleBackend:
    """
    Writes each message as one line on the standard streams.

    err and more severe go to stderr, everything else to stdout. Streams are
    resolved at write time unless given explicitly.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self._out = out
        self._err = err

    @classmethod
    def from_config(cls, config: SyslogConfig) -> "ConsoleBackend":
        return cls()

    def _write(self, severity: Severity, message: str) -> None:
        if severity.is_error:
            stream = self._err or sys.stderr
        else:
            stream = self._out or sys.stdout
        if stream is None:
            raise LogWriteError(f"no console stream for {severity.value} messages")
        try:
            stream.write(message + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            raise LogWriteError(f"console write failed: {e}") from e

    def emerg(self, message: str) -> None:
        self._write(Severity.EMERG, message)

    def alert(self, message: str) -> None:
        self._write(Severity.ALERT, message)

    def crit(self, message: str) -> None:
        self._write(Severity.CRIT, message)

    def err(self, message: str) -> None:
        self._write(Severity.ERR, message)

    def warning(self, message: str) -> None:
        self._write(Severity.WARNING, message)

    def notice(self, message: str) -> None:
        self._write(Severity.NOTICE, message)

    def info(self, message: str) -> None:
        self._write(Severity.INFO, message)

    def debug(self, message: str) -> None:
        self._write(Severity.DEBUG, message)

    def close(self) -> None:
        """Nothing to release; the standard streams belong to the process."""


__all__ = ["ConsoleBackend"]
