from __future__ import annotations

"""Chart settings read from the process environment, with .env files as fallback."""


import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

_T = TypeVar("_T")

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Merge the candidate .env files once; earlier files win per key."""
    from .runtime_helpers import read_dotenv

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for key, value in read_dotenv(path).items():
                merged.setdefault(key, value)
        _DEFAULT_VALUES = merged
    return _DEFAULT_VALUES


def _lookup(name: str) -> Optional[str]:
    """Stripped value from the environment, then the .env defaults; blank counts as unset."""
    for source in (os.environ.get(name), _load_default_values().get(name)):
        if source is not None and source.strip():
            return source.strip()
    return None


def _coerce(name: str, or_value: Optional[_T], convert: Callable[[str], _T], expected: str) -> Optional[_T]:
    raw = _lookup(name)
    if raw is None:
        return or_value
    try:
        return convert(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, f"Expected {expected}") from exc


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(raw)


def env_str(name: str, or_value: Optional[str] = None) -> Optional[str]:
    raw = _lookup(name)
    return or_value if raw is None else raw


def env_int(name: str, or_value: Optional[int] = None) -> Optional[int]:
    return _coerce(name, or_value, int, "an integer")


def env_float(name: str, or_value: Optional[float] = None) -> Optional[float]:
    return _coerce(name, or_value, float, "a number")


def env_bool(name: str, or_value: Optional[bool] = None) -> Optional[bool]:
    return _coerce(name, or_value, _parse_bool, "a boolean such as 1/0 or true/false")


__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_float",
    "env_int",
    "env_str",
]
