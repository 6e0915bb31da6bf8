from __future__ import annotations

from casilleros.core.entities.statistics import OccupancyStatistics
from casilleros.core.repositories.locker_repository import LockerRepository


class GetStatisticsUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self) -> OccupancyStatistics:
        return self._locker_repo.statistics()
