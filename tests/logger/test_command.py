"""Tests for the Command process descriptor."""

import os
import sys

import pytest

from conftest import RecordingBackend
from daemonlog.logger import Command, Logger


def test_from_argv_splits_program_and_args():
    cmd = Command.from_argv(["mkfs.ext4", "-F", "/dev/sda1"])
    assert cmd.path == "mkfs.ext4"
    assert cmd.args == ("-F", "/dev/sda1")


def test_empty_argv_is_rejected():
    with pytest.raises(ValueError):
        Command.from_argv([])


def test_unknown_program_resolves_to_itself():
    assert Command("daemonlog-no-such-tool").resolved_path() == "daemonlog-no-such-tool"


@pytest.mark.skipif(sys.platform == "win32", reason="shell script tool")
class TestEnvPath:
    """A PATH given in Command.env decides which program runs."""

    @pytest.fixture
    def tool_dir(self, tmp_path):
        tool = tmp_path / "dlog-tool"
        tool.write_text("#!/bin/sh\necho from-env-path\n")
        tool.chmod(0o755)
        return tmp_path

    def test_env_path_is_searched(self, tool_dir):
        cmd = Command("dlog-tool", env={"PATH": str(tool_dir)})
        assert cmd.resolved_path() == os.path.join(str(tool_dir), "dlog-tool")

    def test_log_cmd_runs_program_from_env_path(self, tool_dir):
        backend = RecordingBackend()
        logger = Logger(backend=backend)
        cmd = Command("dlog-tool", env={"PATH": str(tool_dir)})

        result = logger.log_cmd(cmd, "tool")

        assert result.stdout == b"from-env-path\n"
        assert backend.messages("debug") == [
            f"op(1): executing: {os.path.join(str(tool_dir), 'dlog-tool')}"
        ]
