"""Uniform JSON / plain-text response helpers."""
from __future__ import annotations

import json
import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import PlainTextResponse, Response

from api.core.errors import SerializationError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def encode_json(data: Any) -> bytes:
    try:
        return json.dumps(
            jsonable_encoder(data),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"could not encode response: {exc}") from exc


def write_error(message: str, status_code: int) -> Response:
    return PlainTextResponse(message or "error", status_code=status_code)


def write_json(data: Any, status_code: int = 200) -> Response:
    """Serialize ``data`` as JSON; encoding failures become a logged 500."""
    try:
        body = encode_json(data)
    except SerializationError as exc:
        logger.exception("Response serialization failed", extra={"error_code": exc.code})
        return write_error("Internal Server Error", 500)
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)
