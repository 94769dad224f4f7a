# daemonlog/logger/log_backends/base.py
"""Capability every log backend provides."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogBackend(Protocol):
    """
    Sink for fully formatted messages, one method per syslog severity.

    The Logger does all interpolation and prefixing; a backend must deliver
    the string it receives verbatim. A failed write raises LogWriteError.
    """

    def emerg(self, message: str) -> None: ...

    def alert(self, message: str) -> None: ...

    def crit(self, message: str) -> None: ...

    def err(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def notice(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def close(self) -> None:
        """Release the backend; raises LogWriteError on failure."""
        ...


__all__ = ["LogBackend"]
