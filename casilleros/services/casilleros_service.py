from __future__ import annotations

import structlog
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from casilleros.core.entities.block import Block as CoreBlock
from casilleros.core.entities.locker import Locker as CoreLocker
from casilleros.core.errors import CasillerosError, ErrorKind
from casilleros.core.use_cases.check_health import CheckHealthUseCase
from casilleros.core.use_cases.create_block import CreateBlockUseCase
from casilleros.core.use_cases.create_locker import CreateLockerUseCase
from casilleros.core.use_cases.delete_block import DeleteBlockUseCase
from casilleros.core.use_cases.delete_locker import DeleteLockerUseCase
from casilleros.core.use_cases.get_statistics import GetStatisticsUseCase
from casilleros.core.use_cases.list_blocks import ListBlocksUseCase
from casilleros.core.use_cases.list_lockers_by_block import ListLockersByBlockUseCase
from casilleros.core.use_cases.update_locker_state import UpdateLockerStateUseCase
from casilleros.core.use_cases.validation import GridLimits
from casilleros.infrastructure.repositories.block_repository_impl import BlockRepositoryImpl
from casilleros.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl
from casilleros.schemas.models import (
    ApiResponse,
    Block,
    BlockName,
    CreateBlockRequest,
    CreateLockerRequest,
    Health,
    Locker,
    Statistics,
    UpdateLockerRequest,
)

logger = structlog.get_logger(__name__)


def classify_error(exc: Exception) -> ErrorKind:
    if isinstance(exc, CasillerosError):
        return exc.kind
    if isinstance(exc, IntegrityError):
        return ErrorKind.CONFLICT
    if isinstance(exc, (OperationalError, InterfaceError)):
        return ErrorKind.STORE_UNAVAILABLE
    return ErrorKind.STORE_ERROR


def _error_message(exc: Exception, fallback: str) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig) or fallback
    return str(exc) or fallback


def error_response(exc: Exception, fallback: str) -> ApiResponse:
    """
    Convert any failure into a ``success: false`` envelope carrying its error kind.
    """
    kind = classify_error(exc)
    if not isinstance(exc, (CasillerosError, SQLAlchemyError)):
        logger.error("Unexpected error", fallback=fallback, exc_info=exc)
    elif kind is not ErrorKind.VALIDATION:
        logger.warning("Operation failed", kind=kind.value, error=str(exc))
    return ApiResponse(success=False, error=_error_message(exc, fallback), error_kind=kind.value)


def _locker_schema(locker: CoreLocker) -> dict:
    return Locker(
        id_casillero=locker.locker_id,
        numero_casillero=locker.code,
        estado=locker.state.value,
        bloque_id=locker.block_id,
        created_at=locker.created_at,
        bloque=BlockName(nombre_bloque=locker.block_name) if locker.block_name is not None else None,
    ).model_dump(mode="json", exclude_none=True)


def _block_schema(block: CoreBlock) -> dict:
    payload = Block(
        id=block.block_id,
        nombre_bloque=block.name,
        nro_filas=block.rows,
        nro_columnas=block.columns,
        created_at=block.created_at,
    ).model_dump(mode="json", exclude_none=True)
    payload["casilleros"] = [_locker_schema(locker) for locker in block.lockers]
    return payload


def health_service(db: Session, version: str) -> ApiResponse:
    use_case = CheckHealthUseCase(block_repo=BlockRepositoryImpl(db), version=version)
    try:
        dto = use_case.execute()
    except Exception as e:
        return error_response(e, "API no disponible")

    return ApiResponse(
        success=True,
        data=Health(status=dto.status, timestamp=dto.timestamp, version=dto.version).model_dump(),
        message="API funcionando correctamente",
    )


def list_blocks_service(db: Session) -> ApiResponse:
    use_case = ListBlocksUseCase(block_repo=BlockRepositoryImpl(db))
    try:
        blocks = use_case.execute()
    except Exception as e:
        return error_response(e, "Error obteniendo bloques")

    return ApiResponse(
        success=True,
        data=[_block_schema(block) for block in blocks],
        message=f"Se encontraron {len(blocks)} bloques",
    )


def create_block_service(body: CreateBlockRequest, db: Session, limits: GridLimits) -> ApiResponse:
    use_case = CreateBlockUseCase(block_repo=BlockRepositoryImpl(db), limits=limits)
    try:
        block = use_case.execute(name=body.nombre, rows=body.filas, columns=body.columnas)
    except Exception as e:
        return error_response(e, "Error creando el bloque")

    return ApiResponse(
        success=True,
        data=_block_schema(block),
        message=f'Bloque "{block.name}" creado exitosamente',
    )


def delete_block_service(block_id: str | int | None, db: Session) -> ApiResponse:
    use_case = DeleteBlockUseCase(block_repo=BlockRepositoryImpl(db))
    try:
        use_case.execute(block_id=block_id)
    except Exception as e:
        return error_response(e, "Error eliminando el bloque")

    return ApiResponse(success=True, message="Bloque eliminado exitosamente")


def list_lockers_service(block_id: str | int | None, db: Session) -> ApiResponse:
    use_case = ListLockersByBlockUseCase(locker_repo=LockerRepositoryImpl(db))
    try:
        lockers = use_case.execute(block_id=block_id)
    except Exception as e:
        return error_response(e, "Error obteniendo casilleros")

    return ApiResponse(
        success=True,
        data=[_locker_schema(locker) for locker in lockers],
        message=f"Se encontraron {len(lockers)} casilleros",
    )


def create_locker_service(body: CreateLockerRequest, db: Session) -> ApiResponse:
    use_case = CreateLockerUseCase(block_repo=BlockRepositoryImpl(db), locker_repo=LockerRepositoryImpl(db))
    try:
        locker = use_case.execute(block_id=body.bloque_id, number=body.numero)
    except Exception as e:
        return error_response(e, "Error creando casillero")

    return ApiResponse(success=True, data=_locker_schema(locker), message="Casillero creado exitosamente")


def update_locker_service(locker_id: str | int | None, body: UpdateLockerRequest, db: Session) -> ApiResponse:
    use_case = UpdateLockerStateUseCase(locker_repo=LockerRepositoryImpl(db))
    try:
        state = use_case.execute(locker_id=locker_id, state=body.estado)
    except Exception as e:
        return error_response(e, "Error actualizando el casillero")

    return ApiResponse(success=True, message=f'Casillero actualizado a "{state.value}"')


def delete_locker_service(locker_id: str | int | None, db: Session) -> ApiResponse:
    use_case = DeleteLockerUseCase(locker_repo=LockerRepositoryImpl(db))
    try:
        use_case.execute(locker_id=locker_id)
    except Exception as e:
        return error_response(e, "Error eliminando casillero")

    return ApiResponse(success=True, message="Casillero eliminado exitosamente")


def statistics_service(db: Session) -> ApiResponse:
    use_case = GetStatisticsUseCase(locker_repo=LockerRepositoryImpl(db))
    try:
        stats = use_case.execute()
    except Exception as e:
        return error_response(e, "Error obteniendo estadísticas")

    return ApiResponse(
        success=True,
        data=Statistics(
            total=stats.total,
            disponibles=stats.disponibles,
            ocupados=stats.ocupados,
            averiados=stats.averiados,
        ).model_dump(),
        message="Estadísticas obtenidas exitosamente",
    )
