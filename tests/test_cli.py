"""Tests for the daemonlog command line."""

import sys

import pytest
from click.testing import CliRunner

from daemonlog.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_emit_writes_prefixed_message(runner):
    result = runner.invoke(
        cli,
        ["emit", "--backend", "console", "-s", "info", "-p", "boot", "-p", "disks", "root", "mounted"],
    )

    assert result.exit_code == 0, result.output
    assert "boot: disks: root mounted" in result.output


def test_emit_message_is_not_interpolated(runner):
    result = runner.invoke(cli, ["emit", "--backend", "console", "100%s done"])

    assert result.exit_code == 0, result.output
    assert "100%s done" in result.output


def test_emit_rejects_unknown_severity(runner):
    result = runner.invoke(cli, ["emit", "--severity", "verbose", "hello"])
    assert result.exit_code == 2


def test_invalid_configuration_is_fatal(runner, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    result = runner.invoke(cli, ["emit", "--backend", "console", "hello"])

    assert result.exit_code == 2
    assert "Configuration error" in result.output


def test_run_narrates_successful_command(runner):
    result = runner.invoke(
        cli,
        ["run", "--backend", "console", "-d", "say hi", "--", sys.executable, "-c", "print('hi')"],
    )

    assert result.exit_code == 0, result.output
    assert "op(1): [started]  say hi" in result.output
    assert "op(1): [finished] say hi" in result.output


def test_run_reports_failed_command(runner):
    result = runner.invoke(
        cli,
        [
            "run",
            "--backend",
            "console",
            "--",
            sys.executable,
            "-c",
            "print('out'); raise SystemExit(4)",
        ],
    )

    assert result.exit_code == 1
    assert "[failed]" in result.output
    assert "out" in result.output
    assert "[finished]" not in result.output
