from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from casilleros.infrastructure.config import Settings
from casilleros.infrastructure.database import Base, create_db_engine, create_session_factory
from casilleros.infrastructure.logging import configure_logging
from casilleros.presentation.routers import request_validation_handler, router
from casilleros.services.casilleros_service import health_service

# registers the tables on Base.metadata
from casilleros.infrastructure.models import models  # noqa: F401

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """
    On startup create missing tables and verify the store answers; an unreachable store aborts startup.
    """
    app_settings: Settings = app.state.settings
    Base.metadata.create_all(bind=app.state.engine)

    db = app.state.session_factory()
    try:
        health = health_service(db, app_settings.version)
    finally:
        db.close()

    if not health.success:
        logger.error("Store health check failed", error=health.error)
        raise RuntimeError(health.error or "Error en health check")

    logger.info("Application started", app=app_settings.app_name, version=app_settings.version)
    yield
    app.state.engine.dispose()


def create_app(app_settings: Settings) -> FastAPI:
    """
    Build the application around an explicit settings object; the engine is owned by the app.
    """
    engine = create_db_engine(app_settings.database_url)

    app = FastAPI(title=app_settings.app_name, version=app_settings.version, lifespan=_lifespan)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)

    if app_settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=app_settings.static_dir, html=True), name="frontend")

    return app


def build_app() -> FastAPI:
    """
    Application factory for ``uvicorn --factory casilleros.main:build_app``.
    """
    app_settings = Settings()
    configure_logging(app_settings)
    return create_app(app_settings)


def run() -> None:
    app_settings = Settings()
    configure_logging(app_settings)
    uvicorn.run(create_app(app_settings), host=app_settings.host, port=app_settings.port)
