# daemonlog/config/logging_config.py
from dataclasses import dataclass

from .config_types import EnvLogBackends, EnvLogLevel
from .env_config import get_env_choice

_default_log_level_env_key = "LOG_LEVEL"
_default_log_backend_env_key = "LOG_BACKEND"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel = EnvLogLevel.WARNING
    log_backend: EnvLogBackends = EnvLogBackends.SYSLOG

    @property
    def level_value(self) -> str:
        """Get string value of the diagnostics level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric diagnostics level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    log_backend_env_key: str = _default_log_backend_env_key,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Both variables are optional; unset values fall back to WARNING diagnostics
    and the syslog backend.

    Raises:
        ConfigurationError: If a variable is set to an unknown value
    """
    return LoggingConfig(
        log_level=get_env_choice(log_level_env_key, EnvLogLevel, EnvLogLevel.WARNING),
        log_backend=get_env_choice(
            log_backend_env_key, EnvLogBackends, EnvLogBackends.SYSLOG
        ),
    )


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
