"""
SQLite storage for leaderboard records.

:class:`RecordStore` owns the single ``records`` table.  One instance
is built at startup from ``settings.database_url`` and attached to the
application state; handlers obtain it through the :func:`get_store`
dependency.  Every operation opens its own connection and closes it
on exit, so concurrent requests never share a connection object.

The store does not validate what it is given.  Names and scores are
checked by the handlers before anything is inserted.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List

import pydantic
from fastapi import Request

from .errors import StorageError
from ..schemas.record import Record

logger = logging.getLogger(__name__)

TOP_RECORDS_LIMIT = 10

_SQLITE_URL_PREFIX = "sqlite:///"


def resolve_database_path(database_url: str) -> str:
    """Turn ``DATABASE_URL`` into a path understood by ``sqlite3``.

    Accepts a plain filesystem path or a ``sqlite:///`` URL
    (``sqlite:////abs/path`` for absolute paths).  Relative paths are
    resolved against the current working directory.
    """
    path = database_url
    if path.startswith(_SQLITE_URL_PREFIX):
        path = path[len(_SQLITE_URL_PREFIX):]
    if path == ":memory:" or os.path.isabs(path):
        return path
    return os.path.abspath(path)


class RecordStore:
    """Gateway to the ``records`` table."""

    def __init__(self, database_url: str) -> None:
        self.database_path = resolve_database_path(database_url)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection.

        Driver errors are re-raised as :class:`StorageError`.
        """
        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to open {self.database_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    def init(self) -> None:
        """Create the ``records`` table if it does not exist yet."""
        with self._cursor() as cursor:
            logger.info("Connected to DB %s", self.database_path)
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS records (
                    name TEXT NOT NULL,
                    score INTEGER NOT NULL
                )
                """
            )
        logger.info("DB initialized")

    def list_top_records(self) -> List[Record]:
        """Return up to ten records, highest score first.

        Rows that do not decode into a :class:`Record` (SQLite enforces
        neither column types nor valid UTF-8) are logged and left out;
        the remaining rows are still returned.
        """
        with self._cursor() as cursor:
            # Text comes back as bytes and is decoded per row below.
            cursor.connection.text_factory = bytes
            rows = cursor.execute(
                "SELECT name, score FROM records ORDER BY score DESC LIMIT ?",
                (TOP_RECORDS_LIMIT,),
            ).fetchall()

        records: List[Record] = []
        for row in rows:
            name, score = row["name"], row["score"]
            try:
                if isinstance(name, bytes):
                    name = name.decode("utf-8")
                records.append(Record(name=name, score=score))
            except (UnicodeDecodeError, pydantic.ValidationError) as exc:
                logger.warning("Bad record %r: %s", tuple(row), exc)
        return records

    def insert_record(self, record: Record) -> None:
        """Append one row; duplicates are allowed."""
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO records (name, score) VALUES (?, ?)",
                (record.name, record.score),
            )


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store attached at startup."""
    return request.app.state.store
