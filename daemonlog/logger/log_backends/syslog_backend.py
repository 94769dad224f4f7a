# daemonlog/logger/log_backends/syslog_backend.py
"""Backend forwarding to the host's syslog daemon over its unix socket."""
import logging
import os
from logging.handlers import SysLogHandler
from pathlib import Path

from daemonlog.config import Severity, SyslogConfig, SyslogFacility
from daemonlog.errors import LogWriteError


class _PrioritySysLogHandler(SysLogHandler):
    """
    SysLogHandler fed records whose levelname already is a syslog priority
    name ("crit", "notice", ...), and which lets send errors propagate.
    """

    def mapPriority(self, levelName: str) -> str:
        return levelName

    def handleError(self, record: logging.LogRecord) -> None:
        # called from inside emit()'s except block
        raise


class SyslogBackend:
    """
    Sends every message at its own severity under a fixed ident.

    Opening fails with OSError when the socket does not exist or refuses
    connections, which the Logger turns into the console fallback.
    """

    def __init__(
        self,
        ident: str = "daemonlog",
        address: str = "/dev/log",
        facility: SyslogFacility = SyslogFacility.DAEMON,
    ):
        socket_path = Path(address)
        if not socket_path.is_socket():
            raise FileNotFoundError(f"no syslog socket at {address}")

        self._handler = _PrioritySysLogHandler(address=address, facility=facility.value)
        self._handler.ident = f"{ident}[{os.getpid()}]: "
        self._ident = ident

        # newer SysLogHandlers swallow connect errors at construction
        sock = self._handler.socket
        try:
            if sock is None:
                raise ConnectionError(f"unable to connect to {address}")
            sock.getpeername()
        except OSError:
            self._handler.close()
            raise

    @classmethod
    def from_config(cls, config: SyslogConfig) -> "SyslogBackend":
        return cls(ident=config.ident, address=config.address, facility=config.facility)

    def _write(self, severity: Severity, message: str) -> None:
        record = logging.makeLogRecord(
            {"name": self._ident, "msg": message, "levelname": severity.value}
        )
        try:
            self._handler.emit(record)
        except (OSError, ValueError) as e:
            raise LogWriteError(f"syslog write failed: {e}") from e

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
        try:
            self._handler.close()
        except OSError as e:
            raise LogWriteError(f"syslog close failed: {e}") from e


__all__ = ["SyslogBackend"]
