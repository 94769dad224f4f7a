"""
Shared fixtures for daemonlog tests.

RecordingBackend stands in for syslog so tests can assert on exactly what
reached the backend, severity included.
"""

from typing import Generator, List, Tuple

import pytest

from daemonlog.config import reset_config
from daemonlog.errors import LogWriteError
from daemonlog.logger import Logger

_ENV_KEYS = [
    "LOG_LEVEL",
    "LOG_BACKEND",
    "SYSLOG_IDENT",
    "SYSLOG_ADDRESS",
    "SYSLOG_FACILITY",
]


class RecordingBackend:
    """Log backend that keeps every message in memory."""

    def __init__(self, fail: bool = False) -> None:
        self.records: List[Tuple[str, str]] = []
        self.fail = fail
        self.closed = False

    def _write(self, severity: str, message: str) -> None:
        if self.fail:
            raise LogWriteError(f"{severity} write refused")
        self.records.append((severity, message))

    def emerg(self, message: str) -> None:
        self._write("emerg", message)

    def alert(self, message: str) -> None:
        self._write("alert", message)

    def crit(self, message: str) -> None:
        self._write("crit", message)

    def err(self, message: str) -> None:
        self._write("err", message)

    def warning(self, message: str) -> None:
        self._write("warning", message)

    def notice(self, message: str) -> None:
        self._write("notice", message)

    def info(self, message: str) -> None:
        self._write("info", message)

    def debug(self, message: str) -> None:
        self._write("debug", message)

    def close(self) -> None:
        if self.fail:
            raise LogWriteError("close refused")
        self.closed = True

    def messages(self, severity: str) -> List[str]:
        return [message for sev, message in self.records if sev == severity]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> Generator[None, None, None]:
    """Isolate every test from the caller's logging environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def logger(backend: RecordingBackend) -> Logger:
    return Logger(backend=backend)
