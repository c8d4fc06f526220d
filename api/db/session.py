"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from api.core.config import get_settings

Base = declarative_base()


def build_engine(url: str, pool_timeout: int = 10) -> Engine:
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    options = {"future": True, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options["pool_timeout"] = pool_timeout
    return create_engine(url, **options)


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache
def get_engine() -> Engine:
    """Process-wide engine for CLI scripts; the web app builds its own in create_app."""
    settings = get_settings()
    return build_engine(settings.database_url, settings.db_pool_timeout)


@lru_cache
def get_sessionmaker() -> sessionmaker:
    return build_sessionmaker(get_engine())
