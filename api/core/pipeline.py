"""
Request body pipeline: decode JSON into a payload model, then validate it.

The two stages are separate so callers can decode without validating. Any
pydantic model can be used as a payload; its ``Field`` constraints are the
rules checked by ``validate``.
"""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, TypeVar

import pydantic
from fastapi import Request
from pydantic import BaseModel

from api.core.errors import DecodeError, ValidationError

T = TypeVar("T", bound=BaseModel)


def _field_keys(schema: type[BaseModel]) -> dict[str, str]:
    """Map every accepted JSON key (alias and name) to its field name."""
    keys: dict[str, str] = {}
    for name, field in schema.model_fields.items():
        keys[name] = name
        if field.alias:
            keys[field.alias] = name
    return keys


def _json_name(schema: type[BaseModel], name: Any) -> str:
    field = schema.model_fields.get(name) if isinstance(name, str) else None
    if field is not None and field.alias:
        return field.alias
    return str(name)


def decode(raw: bytes, schema: type[T]) -> T:
    """Parse ``raw`` into ``schema`` without running its constraints."""
    try:
        payload = json.loads(raw)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"request body is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DecodeError(f"malformed JSON body: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")

    keys = _field_keys(schema)
    unknown = sorted(key for key in payload if key not in keys)
    if unknown:
        raise DecodeError(f"unknown field(s): {', '.join(unknown)}")
    values: dict[str, Any] = {}
    for key, value in payload.items():
        name = keys[key]
        if name in values:
            raise DecodeError(f"field {_json_name(schema, name)} given more than once")
        values[name] = value
    return schema.model_construct(**values)


def validate(instance: T) -> T:
    """Run the model's field constraints; returns a validated copy."""
    schema = type(instance)
    # Keyed by alias so models without populate_by_name validate too.
    data = {
        (schema.model_fields[name].alias or name): getattr(instance, name)
        for name in instance.model_fields_set
    }
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        errors = []
        for err in exc.errors():
            loc = err.get("loc") or ()
            field = _json_name(schema, loc[0]) if loc else "body"
            errors.append({"field": field, "message": err.get("msg", ""), "type": err.get("type", "")})
        message = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        raise ValidationError(message, errors) from exc


def handle_body(schema: type[T]) -> Callable[[Request], Awaitable[T]]:
    """FastAPI dependency that yields a validated ``schema`` from the request body.

    Decode and validation failures propagate as DecodeError/ValidationError;
    the registered error handlers answer them with a 400 and the route
    function is never called.
    """

    async def _dependency(request: Request) -> T:
        raw = await request.body()
        return validate(decode(raw, schema))

    _dependency.__name__ = f"handle_{schema.__name__}_body"
    return _dependency
