# daemonlog/logger/log_backends/registry.py
"""
Backend registry mapping LOG_BACKEND names to backend factories.

    LOG_BACKEND=syslog     # host system log (default)
    LOG_BACKEND=console    # standard streams only
"""

from typing import Callable, Dict, List

from daemonlog.config import EnvLogBackends, SyslogConfig
from daemonlog.errors import ConfigurationError
from .base import LogBackend
from .console_backend import ConsoleBackend
from .syslog_backend import SyslogBackend

BackendFactory = Callable[[SyslogConfig], LogBackend]

_BACKEND_REGISTRY: Dict[str, BackendFactory] = {
    EnvLogBackends.SYSLOG.value: SyslogBackend.from_config,
    EnvLogBackends.CONSOLE.value: ConsoleBackend.from_config,
}


def register_backend(name: str, factory: BackendFactory) -> None:
    """
    Register a custom backend factory.

    Args:
        name: Backend identifier usable wherever a backend name is accepted
        factory: Callable building the backend from the syslog configuration

    Example:
        >>> register_backend("journal", JournalBackend.from_config)
    """
    _BACKEND_REGISTRY[name] = factory


def available_backends() -> List[str]:
    """Names accepted by create_backend()."""
    return sorted(_BACKEND_REGISTRY)


def create_backend(name: str, config: SyslogConfig) -> LogBackend:
    """
    Build the named backend.

    Raises:
        ConfigurationError: If no backend is registered under name
        OSError: If the backend cannot open its sink
    """
    key = str(name)
    factory = _BACKEND_REGISTRY.get(key)
    if factory is None:
        raise ConfigurationError(
            f"Unknown log backend '{key}'. "
            f"Available: {', '.join(available_backends())}"
        )
    return factory(config)


__all__ = [
    "BackendFactory",
    "register_backend",
    "available_backends",
    "create_backend",
]
