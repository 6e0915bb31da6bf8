from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from casilleros.core.entities.block import Block, grid_locker_codes
from casilleros.core.entities.locker import Locker, LockerState
from casilleros.core.entities.statistics import OccupancyStatistics
from casilleros.core.repositories.block_repository import BlockRepository
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.infrastructure.config import Settings
from casilleros.infrastructure.database import Base, create_db_engine, create_session_factory
from casilleros.infrastructure.logging import configure_logging
from casilleros.infrastructure.models import models  # noqa: F401
from casilleros.main import create_app


class SpyBlockRepository(BlockRepository):
    """In-memory stand-in that records every call it receives."""

    def __init__(self, names: dict[int, str] | None = None) -> None:
        self.calls: list[tuple] = []
        self._names = dict(names or {})

    def list_with_lockers(self) -> list[Block]:
        self.calls.append(("list_with_lockers",))
        return []

    def create_with_lockers(self, *, name: str, rows: int, columns: int) -> Block:
        self.calls.append(("create_with_lockers", name, rows, columns))
        lockers = [
            Locker(locker_id=i, code=code, block_id=1)
            for i, code in enumerate(grid_locker_codes(name, rows, columns), start=1)
        ]
        return Block(block_id=1, name=name, rows=rows, columns=columns, lockers=lockers)

    def get_name(self, block_id: int) -> str | None:
        self.calls.append(("get_name", block_id))
        return self._names.get(block_id)

    def delete(self, block_id: int) -> bool:
        self.calls.append(("delete", block_id))
        return block_id in self._names

    def count(self) -> int:
        self.calls.append(("count",))
        return len(self._names)


class SpyLockerRepository(LockerRepository):
    def __init__(self, existing: set[int] | None = None) -> None:
        self.calls: list[tuple] = []
        self._existing = set(existing or ())

    def list_by_block(self, block_id: int) -> list[Locker]:
        self.calls.append(("list_by_block", block_id))
        return []

    def add(self, *, block_id: int, code: str) -> Locker:
        self.calls.append(("add", block_id, code))
        return Locker(locker_id=99, code=code, block_id=block_id)

    def update_state(self, locker_id: int, state: LockerState) -> bool:
        self.calls.append(("update_state", locker_id, state))
        return locker_id in self._existing

    def delete(self, locker_id: int) -> bool:
        self.calls.append(("delete", locker_id))
        return locker_id in self._existing

    def statistics(self) -> OccupancyStatistics:
        self.calls.append(("statistics",))
        return OccupancyStatistics()


@pytest.fixture()
def block_repo() -> SpyBlockRepository:
    return SpyBlockRepository(names={1: "A"})


@pytest.fixture()
def locker_repo() -> SpyLockerRepository:
    return SpyLockerRepository(existing={1})


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url="sqlite+pysqlite:///:memory:",
        environment="test",
        static_dir=tmp_path / "no-frontend",
    )


@pytest.fixture()
def db() -> Iterator[Session]:
    """A session on a fresh in-memory SQLite store with foreign keys enforced."""
    engine = create_db_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    configure_logging(settings)
    return create_app(settings)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    # entering the context runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        yield test_client
