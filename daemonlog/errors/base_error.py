# daemonlog/errors/base_error.py
class DaemonLogError(Exception):
    """Base error for all daemonlog-specific issues."""

    def __init__(self, message: str, code: str = "DAEMONLOG_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


__all__ = ["DaemonLogError"]
