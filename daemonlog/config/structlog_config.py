# daemonlog/config/structlog_config.py
"""
Structlog configuration for daemonlog's own diagnostics.

These events (backend chosen, narration write dropped, close failure) are
about the logger itself and never go through the selected backend.
Configured explicitly via configure_structlog(), or lazily on first use
with the level from LOG_LEVEL.
"""
import logging
import os
import sys
import threading
from typing import Any, Optional

import structlog

from daemonlog.errors import ConfigurationError
from .logging_config import load_logging_config


class _StructlogState:
    """
    Process-aware singleton for structlog configuration state.

    A forked child counts as unconfigured so it sets up its own pipeline.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    _initialized: bool
    _log_level: Optional[int]
    _process_id: Optional[int]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._log_level = None
                    instance._process_id = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        return self._initialized and self._process_id == os.getpid()

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    def mark_configured(self, log_level: int) -> None:
        """Record that structlog is configured with given level in this process."""
        with self._lock:
            self._log_level = log_level
            self._process_id = os.getpid()
            self._initialized = True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._log_level = None
            self._process_id = None


_state = _StructlogState()


def _stderr_logger_factory(*args: Any) -> Any:
    # sys.stderr is looked up per logger so redirected streams are honoured
    stream = sys.stderr
    if stream is None or getattr(stream, "closed", False):
        # daemons may run without fd 2; diagnostics are dropped then
        return structlog.ReturnLogger()
    return structlog.PrintLogger(file=stream)


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog with the specified log level.

    Calling again with the same level is a no-op; a different level
    reconfigures the pipeline.

    Args:
        log_level: Numeric logging level (e.g., logging.WARNING)
    """
    if _state.is_configured and _state.log_level == log_level:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    width=None,
                ),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _state.mark_configured(log_level)


def _env_log_level() -> int:
    try:
        return load_logging_config().level_int
    except ConfigurationError:
        # reported by whoever loads the full configuration
        return logging.WARNING


def get_logger(name: str = "daemonlog") -> structlog.BoundLogger:
    """
    Get a structlog logger for internal diagnostics.

    Configures structlog from LOG_LEVEL if nothing configured it yet in this
    process; an unknown LOG_LEVEL means WARNING here.
    """
    if not _state.is_configured:
        configure_structlog(_env_log_level())
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
]
