"""Reader for ``KEY=value`` files holding chart defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "


def _split_assignment(line: str) -> Optional[Tuple[str, str]]:
    text = line.strip()
    if text.startswith(_EXPORT_PREFIX):
        text = text[len(_EXPORT_PREFIX) :].lstrip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("'\"")


def read_dotenv(path: Path) -> Dict[str, str]:
    """Parse ``path``; a missing file yields no values.

    Raises ConfigurationError when the file exists but cannot be read.
    """
    if not path.is_file():
        return {}
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        raise ConfigurationError.invalid_value("dotenv file", str(path), "File could not be read") from exc

    values: Dict[str, str] = {}
    for line in lines:
        assignment = _split_assignment(line)
        if assignment is not None:
            key, value = assignment
            values[key] = value
    return values
