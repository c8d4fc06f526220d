from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, Field

from api.core.errors import DecodeError, ValidationError
from api.core.pipeline import decode, validate
from api.domain.records import RecordPayload

SAMPLE = {"name": "Alice", "age": 30, "address": "1 Main St", "phoneNumber": "555-0100"}


def _raw(data) -> bytes:
    return json.dumps(data).encode("utf-8")


def test_valid_payload_round_trips_unchanged():
    payload = validate(decode(_raw(SAMPLE), RecordPayload))

    assert isinstance(payload, RecordPayload)
    assert payload.model_dump(by_alias=True) == SAMPLE


def test_decode_accepts_python_field_names():
    body = {"name": "Bob", "age": 41, "address": "2 Oak Ave", "phone_number": "555-0101"}
    payload = validate(decode(_raw(body), RecordPayload))
    assert payload.phone_number == "555-0101"


def test_decode_does_not_run_constraints():
    decoded = decode(_raw({**SAMPLE, "age": -5}), RecordPayload)
    assert decoded.age == -5

    with pytest.raises(ValidationError):
        validate(decoded)


@pytest.mark.parametrize(
    "raw",
    [b"", b"{not json", b'{"name": "Alice",', b"\xc3\x28"],
)
def test_malformed_json_is_a_decode_error(raw):
    with pytest.raises(DecodeError) as excinfo:
        decode(raw, RecordPayload)
    assert excinfo.value.status_code == 400
    assert excinfo.value.message


@pytest.mark.parametrize("body", [[SAMPLE], "Alice", 42, None])
def test_non_object_body_is_a_decode_error(body):
    with pytest.raises(DecodeError, match="expected a JSON object"):
        decode(_raw(body), RecordPayload)


def test_unknown_field_is_a_decode_error():
    with pytest.raises(DecodeError, match="nickname"):
        decode(_raw({**SAMPLE, "nickname": "Al"}), RecordPayload)


@pytest.mark.parametrize("missing", ["name", "age", "address", "phoneNumber"])
def test_missing_field_is_named_in_validation_error(missing):
    body = {k: v for k, v in SAMPLE.items() if k != missing}

    with pytest.raises(ValidationError) as excinfo:
        validate(decode(_raw(body), RecordPayload))

    assert missing in excinfo.value.message
    assert [e["field"] for e in excinfo.value.errors] == [missing]


def test_every_failing_constraint_is_reported():
    body = {"name": "", "age": 200, "address": "x", "phoneNumber": "555"}

    with pytest.raises(ValidationError) as excinfo:
        validate(decode(_raw(body), RecordPayload))

    fields = {e["field"] for e in excinfo.value.errors}
    assert fields == {"name", "age"}


def test_wrong_type_is_a_validation_error():
    with pytest.raises(ValidationError) as excinfo:
        validate(decode(_raw({**SAMPLE, "age": "thirty"}), RecordPayload))
    assert "age" in excinfo.value.message


class ContactPayload(BaseModel):
    phone_number: str = Field(..., alias="phoneNumber", min_length=3)


def test_alias_only_model_validates_without_populate_by_name():
    payload = validate(decode(b'{"phoneNumber": "555"}', ContactPayload))
    assert payload.phone_number == "555"


def test_alias_only_model_reports_field_by_alias():
    with pytest.raises(ValidationError) as excinfo:
        validate(decode(b'{"phoneNumber": "55"}', ContactPayload))
    assert [e["field"] for e in excinfo.value.errors] == ["phoneNumber"]


@pytest.mark.parametrize(
    "extra",
    [{"phone_number": ""}, {"phone_number": "555-0199"}],
)
def test_alias_and_name_for_same_field_is_a_decode_error(extra):
    with pytest.raises(DecodeError, match="phoneNumber given more than once"):
        decode(_raw({**SAMPLE, **extra}), RecordPayload)
