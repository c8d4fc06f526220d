"""
Configuration helpers for the records backend.

Settings are read from environment variables once per process so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    db_statement_timeout_ms: int
    db_pool_timeout: int
    log_level: str
    log_format: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance.

    Values from a `.env` file (path in ENV_FILE, default `.env`) fill in
    variables the process environment does not already define.
    """
    load_dotenv(os.getenv("ENV_FILE", ".env"), override=False)

    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    default_format = "json" if app_env == "prod" else "text"
    return Settings(
        app_env=app_env,
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        db_statement_timeout_ms=max(0, _int(os.getenv("DB_STATEMENT_TIMEOUT_MS"), 5000)),
        db_pool_timeout=max(1, _int(os.getenv("DB_POOL_TIMEOUT"), 10)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_format=(os.getenv("LOG_FORMAT") or default_format).lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), 8000),
    )
