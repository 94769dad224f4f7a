"""Tests for the backend registry."""

import pytest

from conftest import RecordingBackend
from daemonlog.config import EnvLogBackends, SyslogConfig
from daemonlog.errors import ConfigurationError
from daemonlog.logger.log_backends import (
    ConsoleBackend,
    available_backends,
    create_backend,
    register_backend,
)
from daemonlog.logger.log_backends import registry


@pytest.fixture
def restore_registry():
    saved = dict(registry._BACKEND_REGISTRY)
    yield
    registry._BACKEND_REGISTRY.clear()
    registry._BACKEND_REGISTRY.update(saved)


def test_builtin_backends_are_registered():
    assert available_backends() == ["console", "syslog"]


def test_create_console_backend_by_enum():
    backend = create_backend(EnvLogBackends.CONSOLE, SyslogConfig())
    assert isinstance(backend, ConsoleBackend)


def test_unknown_backend_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="Available: console, syslog"):
        create_backend("journal", SyslogConfig())


def test_syslog_open_failure_propagates():
    with pytest.raises(OSError):
        create_backend("syslog", SyslogConfig(address="/nonexistent/dev/log"))


def test_register_custom_backend(restore_registry):
    recorded = RecordingBackend()
    register_backend("memory", lambda config: recorded)

    assert "memory" in available_backends()
    assert create_backend("memory", SyslogConfig()) is recorded
