# daemonlog/logger/command.py
"""Description of an external command that has not been started yet."""
import shutil
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Command:
    """
    Program path plus arguments for Logger.log_cmd().

    There are deliberately no stream fields: log_cmd() captures stdout and
    stderr itself.
    """

    path: str
    args: Tuple[str, ...] = ()
    cwd: Optional[str] = None
    env: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("command path must not be empty")
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_argv(cls, argv: Sequence[str], **kwargs) -> "Command":
        """Build a Command from a full argv list (program first)."""
        if not argv:
            raise ValueError("argv must contain at least the program")
        return cls(path=argv[0], args=tuple(argv[1:]), **kwargs)

    def resolved_path(self) -> str:
        """
        The program looked up on PATH, or the path as given if not found.

        A PATH in env takes precedence over the current process PATH.
        """
        search_path = self.env.get("PATH") if self.env is not None else None
        return shutil.which(self.path, path=search_path) or self.path


__all__ = ["Command"]
