# daemonlog/logger/logger.py
"""
Priority-leveled logger for daemons: prefix context and operation narration.

Usage:
    from daemonlog import Command, new_logger

    logger = new_logger()
    logger.push_prefix("disks")
    logger.info("found %d devices", 3)           # "disks: found 3 devices"

    logger.log_op(mount_root, "mounting %s", "/sysroot")
    logger.log_cmd(Command("mkfs.ext4", ("/dev/sda1",)), "formatting %s", "/dev/sda1")

    logger.pop_prefix()
    logger.close()

Every operation gets a prefix "op(<hex id>)" for its duration, so messages
written while it runs can be told apart from those of other operations:

    disks: op(1): [started]  mounting /sysroot
    disks: op(1): [finished] mounting /sysroot
"""

import subprocess
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from daemonlog.config import (
    AppConfig,
    Severity,
    get_config,
    get_logger as _get_structlog_logger,
    is_initialized,
    load_app_config,
)
from daemonlog.errors import CommandError, ConfigurationError, LogWriteError
from .command import Command
from .log_backends import ConsoleBackend, LogBackend, create_backend

T = TypeVar("T")

PREFIX_SEPARATOR = ":"

# Padded so the operation descriptions line up
STARTED_MARKER = "[started]  "
FAILED_MARKER = "[failed]   "
FINISHED_MARKER = "[finished] "


def _expand(fmt: str, args: Tuple[Any, ...]) -> str:
    # same rule as logging.LogRecord.getMessage: no args, no interpolation
    return fmt % args if args else fmt


class Logger:
    """
    Facade over one LogBackend.

    Holds a prefix stack prepended to every message and a counter numbering
    the operations run through log_op()/log_cmd(). The instance is the
    shared handle: pass the same object down a call chain so context pushed
    by a caller shows up in a callee's messages. No locking is done; use one
    instance from one logical flow at a time.
    """

    def __init__(
        self,
        backend: Optional[LogBackend] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        """
        Create a logger.

        Args:
            backend: Use this backend as is and skip backend selection
            config: Configuration for backend selection; defaults to the
                initialized process config, else the environment
        """
        self._prefix_stack: List[str] = []
        self._op_sequence = 0
        self._diag = _get_structlog_logger(__name__)

        if backend is not None:
            self._backend = backend
        else:
            self._select_backend(config)

    def _select_backend(self, config: Optional[AppConfig]) -> None:
        try:
            if config is None:
                config = get_config() if is_initialized() else load_app_config()
            self._backend = create_backend(config.logging.log_backend, config.syslog)
        except (OSError, ConfigurationError) as e:
            # the fallback has to be in place before the failure can be reported
            self._backend = ConsoleBackend()
            self._log_quietly(Severity.ERR, "unable to open syslog: %s", e)
        self._diagnose("debug", "log backend selected", backend=type(self._backend).__name__)

    @property
    def backend(self) -> LogBackend:
        return self._backend

    @property
    def prefixes(self) -> Tuple[str, ...]:
        """Current prefix stack, outermost first."""
        return tuple(self._prefix_stack)

    def close(self) -> None:
        """Release the backend. Failures are not reported to the caller."""
        try:
            self._backend.close()
        except (OSError, LogWriteError) as e:
            self._diagnose("debug", "log backend close failed", error=str(e))

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Severity operations. Each raises LogWriteError if the backend write fails.

    def log(self, severity: Severity, fmt: str, *args: Any) -> None:
        """Log a message at the given severity."""
        write: Callable[[str], None] = getattr(self._backend, Severity(severity).value)
        write(self._sprintf(fmt, *args))

    def emerg(self, fmt: str, *args: Any) -> None:
        """Log a message at emergency priority."""
        self.log(Severity.EMERG, fmt, *args)

    def alert(self, fmt: str, *args: Any) -> None:
        """Log a message at alert priority."""
        self.log(Severity.ALERT, fmt, *args)

    def crit(self, fmt: str, *args: Any) -> None:
        """Log a message at critical priority."""
        self.log(Severity.CRIT, fmt, *args)

    def err(self, fmt: str, *args: Any) -> None:
        """Log a message at error priority."""
        self.log(Severity.ERR, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        """Log a message at warning priority."""
        self.log(Severity.WARNING, fmt, *args)

    def notice(self, fmt: str, *args: Any) -> None:
        """Log a message at notice priority."""
        self.log(Severity.NOTICE, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        """Log a message at info priority."""
        self.log(Severity.INFO, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        """Log a message at debug priority."""
        self.log(Severity.DEBUG, fmt, *args)

    # Prefix stack

    def push_prefix(self, fmt: str, *args: Any) -> None:
        """
        Push a label onto the prefix stack.

        The stack is joined oldest first and prepended to every message.
        """
        self._prefix_stack.append(_expand(fmt, args))

    def pop_prefix(self) -> None:
        """
        Remove the most recently pushed label.

        Popping an empty stack only logs a debug message.
        """
        if not self._prefix_stack:
            self._log_quietly(Severity.DEBUG, "popped from empty stack")
            return
        self._prefix_stack.pop()

    @contextmanager
    def prefix(self, fmt: str, *args: Any) -> Iterator[None]:
        """Push a label for the duration of a with block."""
        self.push_prefix(fmt, *args)
        try:
            yield
        finally:
            self.pop_prefix()

    # Operations

    @contextmanager
    def operation(self, fmt: str, *args: Any) -> Iterator[None]:
        """
        Narrate the with block as an operation.

        Logs "[started]" on entry and "[finished]" on normal exit. An
        exception escaping the block is logged at critical priority with a
        "[failed]" marker and re-raised unchanged. The block's messages carry
        an "op(<hex id>)" prefix that is unique within this logger.
        """
        self._op_sequence += 1
        with self.prefix("op(%x)", self._op_sequence):
            description = _expand(fmt, args)
            self._log_quietly(Severity.INFO, STARTED_MARKER + "%s", description)
            try:
                yield
            except Exception as e:
                self._log_quietly(Severity.CRIT, FAILED_MARKER + "%s: %s", description, e)
                raise
            self._log_quietly(Severity.INFO, FINISHED_MARKER + "%s", description)

    def log_op(self, op: Callable[[], T], fmt: str, *args: Any) -> T:
        """
        Call op as an operation (see operation()) and return its result.

        Exceptions raised by op propagate unchanged after being logged.
        """
        with self.operation(fmt, *args):
            return op()

    def log_cmd(
        self, cmd: Command, fmt: str, *args: Any
    ) -> "subprocess.CompletedProcess[bytes]":
        """
        Run cmd as an operation with its output captured.

        The resolved program path and its arguments are logged at debug
        priority first. stdout and stderr are collected in memory; if the
        command cannot be started or exits non-zero, a CommandError quoting
        both is logged in the "[failed]" line and raised.
        """

        def run() -> "subprocess.CompletedProcess[bytes]":
            path = cmd.resolved_path()
            if cmd.args:
                self._log_quietly(Severity.DEBUG, "executing: %s %s", path, list(cmd.args))
            else:
                self._log_quietly(Severity.DEBUG, "executing: %s", path)

            try:
                return subprocess.run(
                    [path, *cmd.args],
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    cwd=cmd.cwd,
                    env=cmd.env,
                    check=True,
                )
            except subprocess.CalledProcessError as e:
                raise CommandError(
                    f"{e}: Stdout: {e.stdout!r} Stderr: {e.stderr!r}",
                    returncode=e.returncode,
                    stdout=e.stdout,
                    stderr=e.stderr,
                ) from e
            except OSError as e:
                raise CommandError(f"{e}: Stdout: b'' Stderr: b''") from e

        return self.log_op(run, fmt, *args)

    # Internal helpers

    def _log_quietly(self, severity: Severity, fmt: str, *args: Any) -> None:
        """Log through the backend; a failed write goes to the diagnostics channel."""
        try:
            self.log(severity, fmt, *args)
        except LogWriteError as e:
            self._diagnose(
                "warning",
                "log write dropped",
                severity=severity.value,
                message=self._sprintf(fmt, *args),
                error=str(e),
            )

    def _diagnose(self, level: str, event: str, **kwargs: Any) -> None:
        """Emit an internal diagnostic; a broken stderr silences it."""
        try:
            getattr(self._diag, level)(event, **kwargs)
        except (OSError, ValueError):
            pass

    def _sprintf(self, fmt: str, *args: Any) -> str:
        """The prefix stack, each entry followed by ':', then the expanded message."""
        parts = [f"{prefix}{PREFIX_SEPARATOR}" for prefix in self._prefix_stack]
        parts.append(_expand(fmt, args))
        return " ".join(parts)


def new_logger(config: Optional[AppConfig] = None) -> Logger:
    """
    Create a logger on the configured backend, falling back to the console.

    Never raises: a backend that cannot be opened is reported through the
    fallback.

    Example:
        >>> logger = new_logger()
        >>> logger.notice("service %s ready", "bootcfg")
    """
    return Logger(config=config)


__all__ = [
    "Logger",
    "new_logger",
    "PREFIX_SEPARATOR",
    "STARTED_MARKER",
    "FAILED_MARKER",
    "FINISHED_MARKER",
]
