from __future__ import annotations

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from casilleros.core.entities.block import Block, grid_locker_codes
from casilleros.core.entities.locker import LockerState
from casilleros.core.repositories.block_repository import BlockRepository
from casilleros.infrastructure.models.models import BlockModel, LockerModel
from casilleros.infrastructure.repositories.locker_repository_impl import to_locker

logger = structlog.get_logger(__name__)


def to_block(row: BlockModel) -> Block:
    return Block(
        block_id=row.id,
        name=row.nombre_bloque,
        rows=row.nro_filas,
        columns=row.nro_columnas,
        created_at=row.created_at,
        lockers=[to_locker(locker) for locker in row.casilleros],
    )


class BlockRepositoryImpl(BlockRepository):
    """
    SQLAlchemy implementation for blocks.

    Errors are logged, the session is rolled back and the original exception is re-raised.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def list_with_lockers(self) -> list[Block]:
        try:
            rows = self._db.scalars(
                select(BlockModel).options(selectinload(BlockModel.casilleros)).order_by(BlockModel.id)
            ).all()
        except SQLAlchemyError as e:
            logger.error("Failed to list blocks", error=str(e))
            self._db.rollback()
            raise
        return [to_block(row) for row in rows]

    def create_with_lockers(self, *, name: str, rows: int, columns: int) -> Block:
        row = BlockModel(nombre_bloque=name, nro_filas=rows, nro_columnas=columns)
        row.casilleros = [
            LockerModel(numero_casillero=code, estado=LockerState.AVAILABLE)
            for code in grid_locker_codes(name, rows, columns)
        ]
        try:
            # block and lockers commit together or not at all
            self._db.add(row)
            self._db.commit()
            self._db.refresh(row)
        except SQLAlchemyError as e:
            logger.error("Failed to create block", name=name, rows=rows, columns=columns, error=str(e))
            self._db.rollback()
            raise

        logger.info("Block created", block_id=row.id, lockers=len(row.casilleros))
        return to_block(row)

    def get_name(self, block_id: int) -> str | None:
        try:
            return self._db.scalar(select(BlockModel.nombre_bloque).where(BlockModel.id == block_id))
        except SQLAlchemyError as e:
            logger.error("Failed to fetch block name", block_id=block_id, error=str(e))
            self._db.rollback()
            raise

    def delete(self, block_id: int) -> bool:
        try:
            result = self._db.execute(delete(BlockModel).where(BlockModel.id == block_id))
            self._db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete block", block_id=block_id, error=str(e))
            self._db.rollback()
            raise
        return result.rowcount > 0

    def count(self) -> int:
        try:
            return self._db.scalar(select(func.count()).select_from(BlockModel)) or 0
        except SQLAlchemyError as e:
            logger.error("Store unreachable", error=str(e))
            self._db.rollback()
            raise
