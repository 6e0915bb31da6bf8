from __future__ import annotations

from casilleros.core.entities.locker import LockerState
from casilleros.core.entities.statistics import OccupancyStatistics
from casilleros.infrastructure.repositories.block_repository_impl import BlockRepositoryImpl
from casilleros.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl


def test_tally_counts_each_state_once() -> None:
    stats = OccupancyStatistics.tally(
        [LockerState.AVAILABLE, LockerState.AVAILABLE, LockerState.OCCUPIED, LockerState.DAMAGED]
    )

    assert stats == OccupancyStatistics(total=4, disponibles=2, ocupados=1, averiados=1)


def test_tally_of_nothing_is_all_zero() -> None:
    assert OccupancyStatistics.tally([]) == OccupancyStatistics(total=0, disponibles=0, ocupados=0, averiados=0)


def test_statistics_over_stored_lockers(db) -> None:
    block = BlockRepositoryImpl(db).create_with_lockers(name="E", rows=2, columns=2)
    locker_repo = LockerRepositoryImpl(db)
    occupied, damaged = block.lockers[0].locker_id, block.lockers[1].locker_id
    locker_repo.update_state(occupied, LockerState.OCCUPIED)
    locker_repo.update_state(damaged, LockerState.DAMAGED)

    stats = locker_repo.statistics()

    assert (stats.total, stats.disponibles, stats.ocupados, stats.averiados) == (4, 2, 1, 1)
