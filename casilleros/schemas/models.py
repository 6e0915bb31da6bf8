from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CreateBlockRequest(BaseModel):
    nombre: str | None = None
    filas: int | None = None
    columnas: int | None = None


class CreateLockerRequest(BaseModel):
    bloque_id: int | None = None
    numero: int | None = None


class UpdateLockerRequest(BaseModel):
    # Untyped so any unknown value reaches the use case and gets the error listing valid states
    estado: Any = None


class BlockName(BaseModel):
    nombre_bloque: str


class Locker(BaseModel):
    id_casillero: int
    numero_casillero: str
    estado: str
    bloque_id: int
    created_at: datetime | None = None
    bloque: BlockName | None = None


class Block(BaseModel):
    id: int
    nombre_bloque: str
    nro_filas: int
    nro_columnas: int
    created_at: datetime | None = None
    casilleros: list[Locker] = []


class Statistics(BaseModel):
    total: int
    disponibles: int
    ocupados: int
    averiados: int


class Health(BaseModel):
    status: str
    timestamp: str
    version: str


class ApiResponse(BaseModel):
    """
    Uniform envelope for every operation. Keys left unset are dropped from the payload.
    """
    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    error_kind: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json")
        return {key: value for key, value in payload.items() if key == "success" or value is not None}
