"""Typed environment variable parsing helpers.

A missing variable yields the default, or raises ``KeyError`` when ``required``
is set. For integers a whitespace-only value also counts as missing.
"""

import os
from typing import Optional

_TRUTHY = frozenset({"true", "1", "yes", "on"})
_FALSEY = frozenset({"false", "0", "no", "off"})


def _lookup(name: str, required: bool, allow_blank: bool = False) -> Optional[str]:
    value = os.getenv(name)
    if value is None or (not allow_blank and not value.strip()):
        if required:
            raise KeyError(f"Environment variable '{name}' is required but not set.")
        return None
    return value


def get_env_str(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Get an environment variable as a string."""
    value = _lookup(name, required, allow_blank=True)
    return default if value is None else value


def get_env_int(name: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Get an environment variable as an integer."""
    value = _lookup(name, required)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"Environment variable '{name}' must be an integer, got '{value}'.")


def get_env_bool(
    name: str, default: Optional[bool] = None, required: bool = False
) -> Optional[bool]:
    """Get an environment variable as a boolean.

    Truthy: true, 1, yes, on
    Falsey: false, 0, no, off, (empty string)
    """
    value = os.getenv(name)
    if value is None:
        if required:
            raise KeyError(f"Environment variable '{name}' is required but not set.")
        return default

    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if not normalized or normalized in _FALSEY:
        return False
    raise ValueError(f"Environment variable '{name}' must be a boolean, got '{value}'.")
