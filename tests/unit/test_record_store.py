"""
Unit tests for RecordStore.

Tests cover:
- Table creation
- Top-N ordering and limit
- Skipping rows that do not decode
- Wrapping driver failures in StorageError
"""

import logging
import os
import sqlite3

import pydantic
import pytest

from leaderboard_api.app.core.db import RecordStore, resolve_database_path
from leaderboard_api.app.core.errors import StorageError
from leaderboard_api.app.schemas.record import MAX_SCORE, Record


def _insert_raw(db_path, name, score):
    conn = sqlite3.connect(db_path)
    try:
        conn.execute("INSERT INTO records (name, score) VALUES (?, ?)", (name, score))
        conn.commit()
    finally:
        conn.close()


class TestRecordStore:
    """Tests for the records table gateway."""

    def test_init_is_idempotent(self, store):
        store.init()
        store.init()

        assert store.list_top_records() == []

    def test_init_creates_table_columns(self, store, db_path):
        conn = sqlite3.connect(db_path)
        try:
            columns = conn.execute("PRAGMA table_info(records)").fetchall()
        finally:
            conn.close()

        # (cid, name, type, notnull, default, pk)
        assert [(c[1], c[2], c[3], c[5]) for c in columns] == [
            ("name", "TEXT", 1, 0),
            ("score", "INTEGER", 1, 0),
        ]

    def test_list_orders_by_score_descending(self, store):
        for name, score in [("a", 5), ("b", 9), ("c", 1)]:
            store.insert_record(Record(name=name, score=score))

        assert [r.score for r in store.list_top_records()] == [9, 5, 1]

    def test_list_returns_at_most_ten(self, store):
        for score in range(1, 16):
            store.insert_record(Record(name=f"player{score}", score=score))

        records = store.list_top_records()

        assert len(records) == 10
        assert [r.score for r in records] == list(range(15, 5, -1))

    def test_duplicates_are_kept(self, store):
        store.insert_record(Record(name="alice", score=3))
        store.insert_record(Record(name="alice", score=3))

        assert store.list_top_records() == [
            Record(name="alice", score=3),
            Record(name="alice", score=3),
        ]

    def test_store_does_not_validate(self, store):
        store.insert_record(Record(name="", score=0))

        assert store.list_top_records() == [Record(name="", score=0)]

    def test_undecodable_row_is_skipped(self, store, db_path, caplog):
        store.insert_record(Record(name="alice", score=4))
        store.insert_record(Record(name="bob", score=8))
        _insert_raw(db_path, "broken", "not a number")

        with caplog.at_level(logging.WARNING, logger="leaderboard_api.app.core.db"):
            records = store.list_top_records()

        assert records == [Record(name="bob", score=8), Record(name="alice", score=4)]
        assert "Bad record" in caplog.text

    def test_missing_directory_raises_storage_error(self, tmp_path):
        store = RecordStore(str(tmp_path / "missing" / "leaderboard.db"))

        with pytest.raises(StorageError):
            store.init()

    def test_list_without_table_raises_storage_error(self, db_path):
        with pytest.raises(StorageError, match="no such table"):
            RecordStore(db_path).list_top_records()

    def test_insert_without_table_raises_storage_error(self, db_path):
        with pytest.raises(StorageError):
            RecordStore(db_path).insert_record(Record(name="alice", score=1))

    def test_invalid_utf8_name_is_skipped(self, store, db_path, caplog):
        store.insert_record(Record(name="alice", score=4))
        conn = sqlite3.connect(db_path)
        try:
            conn.execute("INSERT INTO records (name, score) VALUES (CAST(X'FF' AS TEXT), 9)")
            conn.commit()
        finally:
            conn.close()

        with caplog.at_level(logging.WARNING, logger="leaderboard_api.app.core.db"):
            records = store.list_top_records()

        assert records == [Record(name="alice", score=4)]
        assert "Bad record" in caplog.text

    def test_non_ascii_names_round_trip(self, store):
        store.insert_record(Record(name="Zoë 🎮", score=7))

        assert store.list_top_records() == [Record(name="Zoë 🎮", score=7)]

    def test_init_logs_connection_then_table(self, db_path, caplog):
        with caplog.at_level(logging.INFO, logger="leaderboard_api.app.core.db"):
            RecordStore(db_path).init()

        messages = [r.getMessage() for r in caplog.records]
        assert messages == [f"Connected to DB {db_path}", "DB initialized"]

    def test_failed_connection_is_not_logged_as_connected(self, tmp_path, caplog):
        store = RecordStore(str(tmp_path / "missing" / "leaderboard.db"))

        with caplog.at_level(logging.INFO, logger="leaderboard_api.app.core.db"):
            with pytest.raises(StorageError):
                store.init()

        assert "Connected to DB" not in caplog.text

    def test_record_rejects_score_beyond_column_range(self):
        with pytest.raises(pydantic.ValidationError):
            Record(name="alice", score=MAX_SCORE + 1)

    def test_largest_score_is_stored(self, store):
        store.insert_record(Record(name="alice", score=MAX_SCORE))

        assert store.list_top_records() == [Record(name="alice", score=MAX_SCORE)]


class TestResolveDatabasePath:
    """Tests for DATABASE_URL handling."""

    def test_absolute_path_unchanged(self, tmp_path):
        path = str(tmp_path / "x.db")

        assert resolve_database_path(path) == path

    def test_relative_path_resolved_against_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert resolve_database_path("x.db") == os.path.join(os.getcwd(), "x.db")

    def test_sqlite_url_absolute(self):
        assert resolve_database_path("sqlite:////var/lib/leaderboard.db") == "/var/lib/leaderboard.db"

    def test_sqlite_url_relative(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert resolve_database_path("sqlite:///x.db") == os.path.join(os.getcwd(), "x.db")
