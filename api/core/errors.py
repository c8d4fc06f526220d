"""Error taxonomy shared by the request pipeline, repository and responses."""
from __future__ import annotations

from typing import Any


class RecordsError(Exception):
    status_code = 500
    code = "error"

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class DecodeError(RecordsError):
    """Request body is not valid JSON or does not have the expected shape."""

    status_code = 400
    code = "decode_error"


class ValidationError(RecordsError):
    """Request body decoded fine but breaks one or more field constraints."""

    status_code = 400
    code = "validation_error"

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class PersistenceError(RecordsError):
    """Database unreachable, timed out, or rejected the statement."""

    status_code = 500
    code = "persistence_error"


class SerializationError(RecordsError):
    status_code = 500
    code = "serialization_error"
