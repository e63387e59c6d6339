"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on port 8080
and storing records in ``leaderboard.db`` in the working directory.

Each field reads its variable when a ``Settings`` instance is created,
not when this module is imported.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str):
    """Field default reading ``name`` from the environment at instantiation.

    An empty value counts as unset.
    """
    return field(default_factory=lambda: os.getenv(name) or default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Leaderboard API")
    api_version: str = _env("API_VERSION", "1.0.0")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Version prefix under which the records route is mounted.
    api_prefix: str = _env("API_PREFIX", "/v1")

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT") or "8080"))

    # Path or ``sqlite:///`` URL of the records database.
    database_url: str = _env("DATABASE_URL", "leaderboard.db")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
