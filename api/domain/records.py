"""Person record payload schema, constructors and JSON shape."""
from __future__ import annotations

import random
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from api.db.models import PersonRecord


class RecordPayload(BaseModel):
    """Fields a client supplies when creating a record."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=0, le=150)
    address: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., alias="phoneNumber", min_length=1, max_length=32)


def new_record(payload: RecordPayload) -> PersonRecord:
    """Build an unsaved record with a fresh id; the id never changes afterwards."""
    now = datetime.now(timezone.utc)
    return PersonRecord(
        id=uuid.uuid4(),
        name=payload.name,
        age=payload.age,
        address=payload.address,
        phone_number=payload.phone_number,
        created_at=now,
        updated_at=now,
    )


_FIRST_NAMES = ("Alice", "Bruno", "Carla", "Diego", "Elena", "Felipe", "Gabriela", "Hugo", "Isabel", "Joao")
_LAST_NAMES = ("Almeida", "Barros", "Costa", "Dias", "Ferreira", "Gomes", "Lima", "Moreira", "Souza")
_STREETS = ("Main St", "Oak Ave", "Pine Rd", "Maple Dr", "Cedar Ln", "Elm St", "Lake View")


def random_record(rng: random.Random | None = None) -> PersonRecord:
    """Record filled with synthetic data, for seeding local databases."""
    rng = rng or random.Random()
    payload = RecordPayload(
        name=f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
        age=rng.randint(18, 90),
        address=f"{rng.randint(1, 9999)} {rng.choice(_STREETS)}",
        phone_number=f"555-{rng.randint(0, 9999):04d}",
    )
    return new_record(payload)


def record_to_dict(entity: PersonRecord) -> dict:
    return {
        "id": str(entity.id),
        "name": entity.name,
        "age": int(entity.age),
        "address": entity.address,
        "phoneNumber": entity.phone_number,
        "createdAt": entity.created_at,
        "updatedAt": entity.updated_at,
    }
