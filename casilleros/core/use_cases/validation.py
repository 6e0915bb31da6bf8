from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from casilleros.core.errors import ValidationError

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class GridLimits:
    """Policy bounds for a block's grid; both ranges start at 1."""
    max_rows: int = 10
    max_columns: int = 15


def is_int_in_range(value: Any, low: int, high: int | None = None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if value < low:
        return False
    return high is None or value <= high


def to_int(value: Any) -> Any:
    """Integer text (as in a URL path) becomes an int; anything else is returned unchanged."""
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    return value


def require_id(value: Any, message: str) -> int:
    """Raises ValidationError(message) unless value is, or spells, an int >= 1"""
    value = to_int(value)
    if not is_int_in_range(value, 1):
        raise ValidationError(message)
    return value
