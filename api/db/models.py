"""SQLAlchemy models for persisted person records."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    String,
    Text,
    Uuid,
    func,
)

from .session import Base


class PersonRecord(Base):
    __tablename__ = "records"

    id = Column(Uuid, primary_key=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    address = Column(Text, nullable=False)
    phone_number = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
