# daemonlog/config/app_config.py
"""
Complete logger configuration with validation.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from daemonlog.errors import ConfigurationError
from .config_types import SyslogFacility
from .env_config import get_env, get_env_choice
from .logging_config import LoggingConfig, load_logging_config

DEFAULT_SYSLOG_IDENT = "daemonlog"
DEFAULT_SYSLOG_ADDRESS = "/dev/log"


class SyslogConfig(BaseModel):
    """
    Where and under which name messages reach the host system log.
    """

    ident: str = Field(default=DEFAULT_SYSLOG_IDENT, min_length=1, max_length=48)
    address: str = Field(
        default=DEFAULT_SYSLOG_ADDRESS,
        min_length=1,
        description="Path of the syslog unix socket",
    )
    facility: SyslogFacility = Field(default=SyslogFacility.DAEMON)

    model_config = {"frozen": True}

    @field_validator("ident")
    @classmethod
    def validate_ident(cls, v: str) -> str:
        """Reject idents that would break the syslog tag."""
        if any(ch.isspace() for ch in v) or ":" in v:
            raise ValueError(f"ident must not contain whitespace or ':': {v!r}")
        return v


class AppConfig(BaseModel):
    """
    Complete daemonlog configuration.

    Everything is optional in the environment; defaults give a syslog-backed
    logger that reports its own problems at WARNING and above.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    syslog: SyslogConfig = Field(default_factory=SyslogConfig)

    model_config = {"frozen": True}

    def to_dict_safe(self) -> dict[str, Any]:
        """Convert to a plain dict for diagnostics."""
        return {
            "log_level": self.logging.level_value,
            "log_backend": self.logging.log_backend.value,
            **self.syslog.model_dump(mode="json"),
        }


def load_syslog_config() -> SyslogConfig:
    """
    Load syslog configuration from environment.

    Environment variables (all optional):
    - SYSLOG_IDENT: tag prepended by syslog (default: daemonlog)
    - SYSLOG_ADDRESS: unix socket path (default: /dev/log)
    - SYSLOG_FACILITY: facility name (default: daemon)

    Raises:
        ConfigurationError: If a value is invalid
    """
    facility = get_env_choice("SYSLOG_FACILITY", SyslogFacility, SyslogFacility.DAEMON)
    try:
        return SyslogConfig(
            ident=get_env("SYSLOG_IDENT", DEFAULT_SYSLOG_IDENT),
            address=get_env("SYSLOG_ADDRESS", DEFAULT_SYSLOG_ADDRESS),
            facility=facility,
        )
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ConfigurationError(
            "Syslog configuration validation failed:\n"
            + "\n".join(f"  - {err}" for err in errors)
        ) from e


def load_app_config() -> AppConfig:
    """
    Load complete configuration.

    Raises:
        ConfigurationError: If any environment value is invalid
    """
    return AppConfig(
        logging=load_logging_config(),
        syslog=load_syslog_config(),
    )


__all__ = [
    "DEFAULT_SYSLOG_IDENT",
    "DEFAULT_SYSLOG_ADDRESS",
    "SyslogConfig",
    "AppConfig",
    "load_syslog_config",
    "load_app_config",
]
