from __future__ import annotations

from abc import ABC, abstractmethod

from casilleros.core.entities.locker import Locker, LockerState
from casilleros.core.entities.statistics import OccupancyStatistics


class LockerRepository(ABC):
    @abstractmethod
    def list_by_block(self, block_id: int) -> list[Locker]:
        """Lockers of one block, annotated with the block name, ordered by code."""
        raise NotImplementedError

    @abstractmethod
    def add(self, *, block_id: int, code: str) -> Locker:
        """Insert a locker in the Available state."""
        raise NotImplementedError

    @abstractmethod
    def update_state(self, locker_id: int, state: LockerState) -> bool:
        """Return True if a locker matched the id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, locker_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def statistics(self) -> OccupancyStatistics:
        raise NotImplementedError
