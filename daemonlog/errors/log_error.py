# daemonlog/errors/log_error.py
from typing import Optional

from .base_error import DaemonLogError


class LogWriteError(DaemonLogError):
    """A single backend write (or close) failed."""

    def __init__(self, message: str):
        super().__init__(message, code="LOG_WRITE_ERROR")


class CommandError(DaemonLogError):
    """
    An external command exited abnormally.

    The message embeds the captured stdout and stderr so a single log line
    carries the process's own diagnostics.
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message, code="COMMAND_ERROR")


__all__ = ["LogWriteError", "CommandError"]
