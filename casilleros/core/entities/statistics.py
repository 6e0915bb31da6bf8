from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from casilleros.core.entities.locker import LockerState


@dataclass(slots=True)
class OccupancyStatistics:
    """
    Non-persisted snapshot of locker occupancy, recomputed on every request.
    """
    total: int = 0
    disponibles: int = 0
    ocupados: int = 0
    averiados: int = 0

    @classmethod
    def tally(cls, states: Iterable[LockerState | str]) -> OccupancyStatistics:
        stats = cls()
        for state in states:
            stats.total += 1
            if state == LockerState.AVAILABLE:
                stats.disponibles += 1
            elif state == LockerState.OCCUPIED:
                stats.ocupados += 1
            elif state == LockerState.DAMAGED:
                stats.averiados += 1
        return stats
