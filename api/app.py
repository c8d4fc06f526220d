from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.core.config import Settings, get_settings
from api.core.log import setup_logging
from api.db.session import build_engine, build_sessionmaker
from api.error_handlers import register_error_handlers
from api.repositories.record_repository import RecordRepository
from api.routers import records as records_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn --factory api.app:create_app``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    engine = build_engine(settings.database_url, settings.db_pool_timeout)
    repository = RecordRepository(
        build_sessionmaker(engine),
        statement_timeout_ms=settings.db_statement_timeout_ms,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Records API starting (env=%s)", settings.app_env)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title="Person Records API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.records = repository

    register_error_handlers(app)
    app.include_router(records_router.router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
