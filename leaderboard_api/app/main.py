"""
Main entrypoint for the Leaderboard API.

This module assembles the FastAPI application, sets up logging,
builds the record store and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn leaderboard_api.app.main:app

The ``records`` table is created during application startup.  If that
fails the exception propagates out of the lifespan and the server
never starts listening.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import RecordStore
from .core.errors import LeaderboardError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def leaderboard_error_handler(request: Request, exc: LeaderboardError) -> Response:
    """Render a :class:`LeaderboardError` as a plain-text response.

    Server-side failures are logged with their detail at ERROR; rejected
    client input only at INFO.
    """
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # 405 carries no body, only the Allow header.
    if exc.status_code == 405:
        return Response(status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    store : Optional[RecordStore]
        Record store to serve from; defaults to one built from
        ``app_settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)
    store = store or RecordStore(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.init()
        yield

    # Generated docs routes and trailing-slash redirects are disabled:
    # /records is the only path served.
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.store = store

    app.add_exception_handler(LeaderboardError, leaderboard_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
