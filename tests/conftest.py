from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402
from api.db import session as db_session  # noqa: E402


@pytest.fixture()
def db_url(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset cached settings/engine."""
    db_file = tmp_path / "records.db"
    url = f"sqlite:///{db_file}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("LOG_FORMAT", "text")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session.get_sessionmaker.cache_clear()

    yield url

    try:
        db_session.get_engine().dispose()
    except Exception:
        pass
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session.get_sessionmaker.cache_clear()
