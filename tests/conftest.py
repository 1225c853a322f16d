"""Shared pytest configuration for the notification cleanup test-suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

# Settings are read once at import time; configure them before importing ``app``.
TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="notification-cleanup-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")
os.environ["APP_TIMEZONE"] = "UTC"


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    from app.infrastructure import database

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
