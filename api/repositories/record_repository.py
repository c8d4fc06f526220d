"""Persistence gateway for person records backed by SQLAlchemy."""
from __future__ import annotations

import logging

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from api.core.errors import PersistenceError
from api.db.models import PersonRecord

logger = logging.getLogger(__name__)


class RecordRepository:
    """Create/list helpers wrapping a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker, *, statement_timeout_ms: int = 0) -> None:
        self._session_factory = session_factory
        self._statement_timeout_ms = max(0, int(statement_timeout_ms or 0))

    def _apply_deadline(self, session: Session) -> None:
        if not self._statement_timeout_ms:
            return
        if session.get_bind().dialect.name != "postgresql":
            return
        # SET does not accept bind parameters; the value is a validated int.
        session.execute(text(f"SET LOCAL statement_timeout = {self._statement_timeout_ms}"))

    def create(self, record: PersonRecord) -> PersonRecord:
        try:
            with self._session_factory() as session:
                self._apply_deadline(session)
                session.add(record)
                session.commit()
                session.refresh(record)
                return record
        except SQLAlchemyError as exc:
            logger.error("Failed to insert record %s: %s", record.id, exc, extra={"record_id": str(record.id)})
            raise PersistenceError(str(exc)) from exc

    def list(self) -> list[PersonRecord]:
        stmt = (
            select(PersonRecord)
            .where(PersonRecord.deleted_at.is_(None))
            .order_by(PersonRecord.created_at, PersonRecord.id)
        )
        try:
            with self._session_factory() as session:
                self._apply_deadline(session)
                return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Failed to list records: %s", exc)
            raise PersistenceError(str(exc)) from exc
