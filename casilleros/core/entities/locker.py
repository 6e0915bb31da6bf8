from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LockerState(str, Enum):
    AVAILABLE = "Disponible"
    OCCUPIED = "Ocupado"
    DAMAGED = "Averiado"

    @classmethod
    def values(cls) -> list[str]:
        return [state.value for state in cls]


@dataclass(slots=True)
class Locker:
    locker_id: int | None
    code: str
    block_id: int
    state: LockerState = LockerState.AVAILABLE
    created_at: datetime | None = None
    block_name: str | None = None


def single_locker_code(block_name: str, number: int) -> str:
    return f"{block_name}-{number}"
