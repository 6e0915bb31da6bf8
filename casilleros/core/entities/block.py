from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from casilleros.core.entities.locker import Locker


@dataclass(slots=True)
class Block:
    block_id: int
    name: str
    rows: int
    columns: int
    created_at: datetime | None = None
    lockers: list[Locker] = field(default_factory=list)


def grid_locker_codes(name: str, rows: int, columns: int) -> list[str]:
    """
    Codes for every cell of a ``rows x columns`` grid, row-major: ``{name}-{row}-{col}``, 1-based.
    """
    return [f"{name}-{row}-{col}" for row in range(1, rows + 1) for col in range(1, columns + 1)]
