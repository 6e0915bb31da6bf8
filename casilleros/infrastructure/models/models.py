from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casilleros.core.entities.locker import LockerState
from casilleros.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BlockModel(Base):
    __tablename__ = "bloques"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre_bloque: Mapped[str] = mapped_column(String, nullable=False)
    nro_filas: Mapped[int] = mapped_column(Integer, nullable=False)
    nro_columnas: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    casilleros: Mapped[list[LockerModel]] = relationship(
        "LockerModel",
        back_populates="bloque",
        order_by="LockerModel.id_casillero",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class LockerModel(Base):
    __tablename__ = "casilleros"

    id_casillero: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    numero_casillero: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    estado: Mapped[LockerState] = mapped_column(
        Enum(LockerState, values_callable=lambda states: [s.value for s in states], name="estado_casillero"),
        nullable=False,
        default=LockerState.AVAILABLE,
    )
    bloque_id: Mapped[int] = mapped_column(
        ForeignKey("bloques.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    bloque: Mapped[BlockModel] = relationship("BlockModel", back_populates="casilleros")
