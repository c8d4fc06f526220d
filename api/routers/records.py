from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from api.core.errors import PersistenceError
from api.core.pipeline import handle_body
from api.core.responses import write_error, write_json
from api.domain.records import RecordPayload, new_record, record_to_dict
from api.repositories.record_repository import RecordRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"])


def get_repository(request: Request) -> RecordRepository:
    return request.app.state.records


@router.post("/person", status_code=201)
def create_person(
    payload: RecordPayload = Depends(handle_body(RecordPayload)),
    repository: RecordRepository = Depends(get_repository),
) -> Response:
    record = new_record(payload)
    logger.info("Creating record %s", record.id, extra={"record_id": str(record.id)})
    try:
        stored = repository.create(record)
    except PersistenceError as exc:
        return write_error(exc.message, 500)
    return write_json(record_to_dict(stored), 201)


@router.get("/person")
def list_people(repository: RecordRepository = Depends(get_repository)) -> Response:
    try:
        records = repository.list()
    except PersistenceError as exc:
        return write_error(exc.message, 500)
    logger.info("Listing %d records", len(records), extra={"count": len(records)})
    return write_json([record_to_dict(entity) for entity in records], 200)
