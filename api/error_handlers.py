"""Global exception handlers: every error leaves as a plain-text response."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from api.core.errors import RecordsError
from api.core.responses import write_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecordsError)
    async def records_error_handler(request: Request, exc: RecordsError):
        level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(
            level,
            "%s on %s %s: %s",
            exc.code,
            request.method,
            request.url.path,
            exc.message,
            extra={"error_code": exc.code, "path": request.url.path, "status_code": exc.status_code},
        )
        return write_error(exc.message, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return write_error("Internal Server Error", 500)
