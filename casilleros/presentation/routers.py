from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from casilleros.core.errors import ErrorKind
from casilleros.core.use_cases.validation import GridLimits
from casilleros.infrastructure.config import Settings
from casilleros.schemas.models import ApiResponse, CreateBlockRequest, CreateLockerRequest, UpdateLockerRequest
from casilleros.services.casilleros_service import (
    create_block_service,
    create_locker_service,
    delete_block_service,
    delete_locker_service,
    health_service,
    list_blocks_service,
    list_lockers_service,
    statistics_service,
    update_locker_service,
)

router = APIRouter(prefix="/api")


def get_db(request: Request) -> Session:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _json(response: ApiResponse) -> JSONResponse:
    # Logical failures travel in the body; the HTTP status is always 200
    return JSONResponse(status_code=200, content=response.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer malformed requests (non-integer ids, wrongly typed fields) with the usual envelope
    instead of FastAPI's 422.
    """
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    return _json(
        ApiResponse(success=False, error=f"Solicitud inválida: {details}", error_kind=ErrorKind.VALIDATION.value)
    )


@router.get("/health")
def get_health(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> JSONResponse:
    """
    Health check; fails when the store is unreachable
    """
    return _json(health_service(db, settings.version))


@router.get("/bloques")
def get_bloques(db: Session = Depends(get_db)) -> JSONResponse:
    """
    List every block with its lockers
    """
    return _json(list_blocks_service(db))


@router.post("/bloques")
def post_bloques(
    body: CreateBlockRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Create a block and its grid of lockers
    """
    limits = GridLimits(max_rows=settings.max_rows, max_columns=settings.max_columns)
    return _json(create_block_service(body, db, limits))


@router.delete("/bloques/{block_id}")
def delete_bloques_id(block_id: str, db: Session = Depends(get_db)) -> JSONResponse:
    return _json(delete_block_service(block_id, db))


@router.get("/casilleros/{block_id}")
def get_casilleros_bloque_id(block_id: str, db: Session = Depends(get_db)) -> JSONResponse:
    """
    List the lockers of one block
    """
    return _json(list_lockers_service(block_id, db))


@router.post("/casilleros")
def post_casilleros(body: CreateLockerRequest, db: Session = Depends(get_db)) -> JSONResponse:
    return _json(create_locker_service(body, db))


@router.put("/casilleros/{locker_id}")
def put_casilleros_id(locker_id: str, body: UpdateLockerRequest, db: Session = Depends(get_db)) -> JSONResponse:
    """
    Change the occupancy state of a locker
    """
    return _json(update_locker_service(locker_id, body, db))


@router.delete("/casilleros/{locker_id}")
def delete_casilleros_id(locker_id: str, db: Session = Depends(get_db)) -> JSONResponse:
    return _json(delete_locker_service(locker_id, db))


@router.get("/estadisticas")
def get_estadisticas(db: Session = Depends(get_db)) -> JSONResponse:
    """
    Occupancy counts over all lockers
    """
    return _json(statistics_service(db))
