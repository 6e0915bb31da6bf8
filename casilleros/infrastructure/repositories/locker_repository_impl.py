from __future__ import annotations

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from casilleros.core.entities.locker import Locker, LockerState
from casilleros.core.entities.statistics import OccupancyStatistics
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.infrastructure.models.models import LockerModel

logger = structlog.get_logger(__name__)


def to_locker(row: LockerModel, *, block_name: str | None = None) -> Locker:
    return Locker(
        locker_id=row.id_casillero,
        code=row.numero_casillero,
        block_id=row.bloque_id,
        state=LockerState(row.estado),
        created_at=row.created_at,
        block_name=block_name,
    )


class LockerRepositoryImpl(LockerRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def list_by_block(self, block_id: int) -> list[Locker]:
        try:
            rows = self._db.scalars(
                select(LockerModel)
                .options(joinedload(LockerModel.bloque))
                .where(LockerModel.bloque_id == block_id)
                .order_by(LockerModel.numero_casillero)
            ).all()
        except SQLAlchemyError as e:
            logger.error("Failed to list lockers", block_id=block_id, error=str(e))
            self._db.rollback()
            raise
        return [to_locker(row, block_name=row.bloque.nombre_bloque) for row in rows]

    def add(self, *, block_id: int, code: str) -> Locker:
        row = LockerModel(numero_casillero=code, estado=LockerState.AVAILABLE, bloque_id=block_id)
        try:
            self._db.add(row)
            self._db.commit()
            self._db.refresh(row)
        except SQLAlchemyError as e:
            logger.error("Failed to create locker", block_id=block_id, code=code, error=str(e))
            self._db.rollback()
            raise
        return to_locker(row)

    def update_state(self, locker_id: int, state: LockerState) -> bool:
        try:
            result = self._db.execute(
                update(LockerModel).where(LockerModel.id_casillero == locker_id).values(estado=state)
            )
            self._db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to update locker", locker_id=locker_id, state=state.value, error=str(e))
            self._db.rollback()
            raise
        return result.rowcount > 0

    def delete(self, locker_id: int) -> bool:
        try:
            result = self._db.execute(delete(LockerModel).where(LockerModel.id_casillero == locker_id))
            self._db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete locker", locker_id=locker_id, error=str(e))
            self._db.rollback()
            raise
        return result.rowcount > 0

    def statistics(self) -> OccupancyStatistics:
        try:
            states = self._db.scalars(select(LockerModel.estado)).all()
        except SQLAlchemyError as e:
            logger.error("Failed to compute statistics", error=str(e))
            self._db.rollback()
            raise
        return OccupancyStatistics.tally(states)
