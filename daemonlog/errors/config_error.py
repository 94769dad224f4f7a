# daemonlog/errors/config_error.py
from .base_error import DaemonLogError


class ConfigurationError(DaemonLogError):
    """
    Raised when logger configuration is invalid.
    """

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


__all__ = ["ConfigurationError"]
