"""Process entry point for the leaderboard service.

Reads settings from the environment (``PORT``, ``DATABASE_URL`` and
friends, see ``leaderboard_api/app/core/config.py``), builds the
application and serves it with Uvicorn.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from leaderboard_api.app.core.config import Settings
from leaderboard_api.app.core.logging_config import setup_logging
from leaderboard_api.app.main import create_app

logger = logging.getLogger(__name__)

# Exit status used by ``uvicorn.run`` when application startup fails.
STARTUP_FAILURE = 3


async def serve(app_settings: Settings) -> bool:
    """Serve the API until shutdown; return whether startup succeeded."""
    app = create_app(app_settings)
    config = Config(
        app=app,
        host=app_settings.host,
        port=app_settings.port,
        reload=False,
        log_config=None,
        log_level=app_settings.log_level.lower(),
    )
    server = Server(config)
    serving = asyncio.create_task(server.serve())
    # ``started`` is set once the lifespan has run and the socket is bound.
    while not server.started and not serving.done():
        await asyncio.sleep(0.05)
    if server.started:
        logger.info("Listening on %s", app_settings.port)
    await serving
    return server.started


def main() -> None:
    app_settings = Settings.from_env()
    setup_logging(app_settings.log_level)
    if not asyncio.run(serve(app_settings)):
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
