# daemonlog/config/env_config.py
import os
from enum import Enum
from typing import Optional, Type, TypeVar

from daemonlog.errors import ConfigurationError

E = TypeVar("E", bound=Enum)


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default. Empty values count as unset.
    """
    return os.getenv(name) or default


def get_env_choice(name: str, choices: Type[E], default: E) -> E:
    """
    Parse an environment variable into one of the members of an Enum.

    Args:
        name: Environment variable name
        choices: Enum whose values are the accepted spellings
        default: Member returned when the variable is unset

    Raises:
        ConfigurationError: If the value matches no member
    """
    raw = get_env(name)
    if raw is None:
        return default

    normalized = raw.strip()
    for member in choices:
        if str(member.value).lower() == normalized.lower():
            return member

    valid = ", ".join(str(member.value) for member in choices)
    raise ConfigurationError(f"Invalid {name}: {raw!r}. Must be one of [{valid}]")


__all__ = ["get_env", "get_env_choice"]
