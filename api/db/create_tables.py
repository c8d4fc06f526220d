"""Create the records schema if it does not exist yet."""
from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(engine: Engine | None = None) -> None:
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    from api.core.config import get_settings
    from api.core.log import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        create_all()
        print("Database tables created successfully.")
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
