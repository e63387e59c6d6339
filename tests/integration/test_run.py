"""Tests for the process entry point in run.py."""

import asyncio
import logging

import run
from leaderboard_api.app.core.config import Settings


class TestServe:
    """Tests for run.serve."""

    def test_failed_startup_is_not_reported_as_listening(self, tmp_path, caplog):
        app_settings = Settings(
            database_url=str(tmp_path / "missing" / "leaderboard.db"),
            host="127.0.0.1",
            port=0,
        )

        with caplog.at_level(logging.INFO):
            started = asyncio.run(run.serve(app_settings))

        assert started is False
        assert "Connected to DB" not in caplog.text
        assert "Listening on" not in caplog.text
