"""
Tests for the syslog backend against a fake syslog daemon.

The fake is a unix datagram socket bound in a short temporary directory
(unix socket paths are limited to ~100 bytes).
"""

import os
import shutil
import socket
import tempfile
from pathlib import Path

import pytest

from daemonlog.config import SyslogConfig, SyslogFacility
from daemonlog.errors import LogWriteError
from daemonlog.logger.log_backends import LogBackend, SyslogBackend

pytestmark = pytest.mark.skipif(
    not hasattr(socket, "AF_UNIX"), reason="unix sockets required"
)


@pytest.fixture
def socket_dir():
    path = Path(tempfile.mkdtemp(prefix="dlog"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def syslog_server(socket_dir):
    """A bound datagram socket standing in for /dev/log."""
    address = socket_dir / "log"
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(str(address))
    server.settimeout(2)
    yield address, server
    server.close()


def _tag(ident: str) -> str:
    return f"{ident}[{os.getpid()}]: "


def test_messages_arrive_with_priority_and_ident(syslog_server):
    address, server = syslog_server
    backend = SyslogBackend(ident="test", address=str(address))
    try:
        backend.crit("disk on fire")
        data = server.recv(4096)
    finally:
        backend.close()

    # daemon facility (3) << 3 | crit (2)
    assert data == f"<26>{_tag('test')}disk on fire\x00".encode()


@pytest.mark.parametrize(
    "method,priority",
    [
        ("emerg", 0),
        ("alert", 1),
        ("crit", 2),
        ("err", 3),
        ("warning", 4),
        ("notice", 5),
        ("info", 6),
        ("debug", 7),
    ],
)
def test_each_method_uses_its_priority(syslog_server, method, priority):
    address, server = syslog_server
    backend = SyslogBackend(
        ident="prio", address=str(address), facility=SyslogFacility.LOCAL0
    )
    try:
        getattr(backend, method)("x")
        data = server.recv(4096)
    finally:
        backend.close()

    # local0 is facility 16
    assert data.startswith(f"<{16 * 8 + priority}>".encode())


def test_from_config(syslog_server):
    address, server = syslog_server
    config = SyslogConfig(ident="cfg", address=str(address), facility=SyslogFacility.USER)
    backend = SyslogBackend.from_config(config)
    try:
        assert isinstance(backend, LogBackend)
        backend.info("configured")
        assert server.recv(4096) == f"<14>{_tag('cfg')}configured\x00".encode()
    finally:
        backend.close()


def test_missing_socket_fails_to_open(socket_dir):
    with pytest.raises(OSError):
        SyslogBackend(address=str(socket_dir / "absent"))


def test_regular_file_fails_to_open(socket_dir):
    path = socket_dir / "not-a-socket"
    path.write_text("")
    with pytest.raises(OSError):
        SyslogBackend(address=str(path))


def test_socket_without_listener_fails_to_open(syslog_server):
    address, server = syslog_server
    server.close()
    with pytest.raises(OSError):
        SyslogBackend(address=str(address))


def test_write_after_daemon_exit_raises(syslog_server):
    address, server = syslog_server
    backend = SyslogBackend(address=str(address))
    server.close()
    try:
        with pytest.raises(LogWriteError):
            backend.err("nobody listening")
    finally:
        backend.close()


def test_unencodable_message_raises_write_error(syslog_server):
    address, server = syslog_server
    backend = SyslogBackend(address=str(address))
    filename = b"bad\xff".decode("utf-8", "surrogateescape")
    try:
        with pytest.raises(LogWriteError):
            backend.info(f"removing {filename}")
    finally:
        backend.close()
