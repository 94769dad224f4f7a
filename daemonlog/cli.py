# daemonlog/cli.py
"""
Command line front end, in the spirit of logger(1).

    daemonlog emit --severity notice --prefix boot "root mounted"
    daemonlog run --describe "formatting /dev/sda1" -- mkfs.ext4 /dev/sda1
"""
import sys
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from daemonlog.config import (
    AppConfig,
    EnvLogBackends,
    LoggingConfig,
    Severity,
    initialize_config,
)
from daemonlog.errors import CommandError, ConfigurationError, LogWriteError
from daemonlog.logger import Command, Logger

_SEVERITIES = [severity.value for severity in Severity]
_BACKENDS = [backend.value for backend in EnvLogBackends]


def _open_logger(backend: Optional[str]) -> Logger:
    load_dotenv()
    try:
        config = initialize_config()
    except ConfigurationError as e:
        # no logger yet, and nothing sensible to fall back to
        click.echo(f"FATAL: Configuration error:\n{e}", err=True)
        sys.exit(2)

    if backend is not None:
        config = AppConfig(
            logging=LoggingConfig(
                log_level=config.logging.log_level,
                log_backend=EnvLogBackends(backend),
            ),
            syslog=config.syslog,
        )
    return Logger(config=config)


@click.group()
@click.version_option(package_name="daemonlog")
def cli() -> None:
    """Write daemon log messages to syslog, or the console if it is unavailable."""


@cli.command()
@click.option(
    "--severity",
    "-s",
    type=click.Choice(_SEVERITIES),
    default=Severity.NOTICE.value,
    show_default=True,
)
@click.option("--prefix", "-p", "prefixes", multiple=True, help="Context label, repeatable.")
@click.option("--backend", "-b", type=click.Choice(_BACKENDS), default=None)
@click.argument("message", nargs=-1, required=True)
def emit(
    severity: str, prefixes: Tuple[str, ...], backend: Optional[str], message: Tuple[str, ...]
) -> None:
    """Log MESSAGE once at the given severity."""
    with _open_logger(backend) as logger:
        for label in prefixes:
            logger.push_prefix("%s", label)
        try:
            logger.log(Severity(severity), "%s", " ".join(message))
        except LogWriteError as e:
            click.echo(f"error: {e}", err=True)
            sys.exit(1)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option("--describe", "-d", default=None, help="Operation description (default: the command line).")
@click.option("--backend", "-b", type=click.Choice(_BACKENDS), default=None)
@click.argument("argv", nargs=-1, required=True, type=click.UNPROCESSED)
def run(describe: Optional[str], backend: Optional[str], argv: Tuple[str, ...]) -> None:
    """Run ARGV as a logged operation; exit 1 if it fails."""
    command = Command.from_argv(argv)
    description = describe or " ".join(argv)
    with _open_logger(backend) as logger:
        try:
            logger.log_cmd(command, "%s", description)
        except CommandError:
            sys.exit(1)


def main() -> None:
    cli()


__all__ = ["cli", "main"]
