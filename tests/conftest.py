"""Shared fixtures: a temporary database, a store and an HTTP test client."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from leaderboard_api.app.core.config import Settings
from leaderboard_api.app.core.db import RecordStore
from leaderboard_api.app.main import create_app


@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh SQLite database file."""
    return str(tmp_path / "leaderboard.db")


@pytest.fixture
def store(db_path):
    """Initialised record store backed by ``db_path``."""
    store = RecordStore(db_path)
    store.init()
    return store


@pytest.fixture
def app_settings(db_path):
    return Settings(database_url=db_path, api_prefix="/v1")


@pytest.fixture
def client(app_settings):
    """TestClient with the lifespan run, so the table exists."""
    app = create_app(app_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def count_rows(db_path):
    """Return a callable counting rows in ``records`` straight from SQLite."""

    def _count() -> int:
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM records").fetchone()[0]
        finally:
            conn.close()

    return _count
