# daemonlog/config/__init__.py
"""
Configuration management with validation.
"""

from .config_types import EnvLogBackends, EnvLogLevel, Severity, SyslogFacility
from .env_config import get_env, get_env_choice
from .logging_config import LoggingConfig, load_logging_config
from .app_config import (
    DEFAULT_SYSLOG_ADDRESS,
    DEFAULT_SYSLOG_IDENT,
    AppConfig,
    SyslogConfig,
    load_app_config,
    load_syslog_config,
)
from .structlog_config import configure_structlog, get_logger, is_configured
from .initialize_config import (
    get_config,
    initialize_config,
    is_initialized,
    reset_config,
)

__all__ = [
    # Types
    "EnvLogBackends",
    "EnvLogLevel",
    "Severity",
    "SyslogFacility",
    # Env utilities
    "get_env",
    "get_env_choice",
    # Config models and loaders
    "LoggingConfig",
    "load_logging_config",
    "AppConfig",
    "SyslogConfig",
    "DEFAULT_SYSLOG_ADDRESS",
    "DEFAULT_SYSLOG_IDENT",
    "load_app_config",
    "load_syslog_config",
    # Structlog
    "configure_structlog",
    "get_logger",
    "is_configured",
    # Initialization
    "initialize_config",
    "get_config",
    "is_initialized",
    "reset_config",
]
