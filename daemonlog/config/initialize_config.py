# daemonlog/config/initialize_config.py
"""
Configuration initialization module.

Entry points call initialize_config() once at startup; loggers created
afterwards pick the stored configuration up through get_config().
"""
from typing import Optional

from rich.traceback import install as install_rich_traceback

from .app_config import AppConfig, load_app_config
from .structlog_config import configure_structlog


class _ConfigState:
    """
    Singleton holding the process configuration.
    """

    _instance: Optional["_ConfigState"] = None
    _config: Optional[AppConfig]

    def __new__(cls) -> "_ConfigState":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = None
        return cls._instance

    @property
    def initialized(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> AppConfig:
        """Get process configuration."""
        if self._config is None:
            raise RuntimeError(
                "Configuration not initialized. Call initialize_config() at startup."
            )
        return self._config

    def set_config(self, config: Optional[AppConfig]) -> None:
        self._config = config


_state = _ConfigState()


def initialize_config(config: Optional[AppConfig] = None) -> AppConfig:
    """
    Load, validate and store the process configuration.

    Args:
        config: Ready-made configuration; loaded from the environment if omitted

    Returns:
        The stored AppConfig

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if config is None:
        config = load_app_config()

    # process-wide: only entry points call this
    install_rich_traceback(show_locals=False, width=None, extra_lines=3)
    configure_structlog(config.logging.level_int)
    _state.set_config(config)
    return config


def get_config() -> AppConfig:
    """
    Get the stored configuration.

    Raises:
        RuntimeError: If not initialized
    """
    return _state.config


def is_initialized() -> bool:
    """Check whether initialize_config() has stored a configuration."""
    return _state.initialized


def reset_config() -> None:
    """Forget the stored configuration. FOR TESTING ONLY."""
    _state.set_config(None)


__all__ = ["initialize_config", "get_config", "is_initialized", "reset_config"]
