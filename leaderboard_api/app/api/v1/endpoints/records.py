"""
Record handlers for API v1.

``list_records`` returns the ten best scores as a JSON array and
``create_record`` stores one submission.  Neither keeps state between
requests; the store is passed in by the router.

Failures are raised as :mod:`leaderboard_api.app.core.errors` types and
rendered by the application's exception handler.  Storage failures get
a generic message so driver detail never reaches the client.
"""

import logging

from fastapi import Request, Response, status

from leaderboard_api.app.core.db import RecordStore
from leaderboard_api.app.core.errors import StorageError
from leaderboard_api.app.services.record_service import RecordService

logger = logging.getLogger(__name__)


async def list_records(store: RecordStore) -> Response:
    """Return the top records, highest score first."""
    try:
        records = store.list_top_records()
    except StorageError as exc:
        raise StorageError(exc.detail, message="Failed to get records") from exc

    body = RecordService.encode_records(records)
    logger.info("GET records ok")
    return Response(content=body, media_type="application/json")


async def create_record(request: Request, store: RecordStore) -> Response:
    """Validate the submitted record and store it.

    Responds 200 with an empty body.  Malformed or invalid input is
    rejected with 400 before the store is touched.
    """
    record = RecordService.parse_record(await request.body())

    try:
        store.insert_record(record)
    except StorageError as exc:
        raise StorageError(exc.detail, message="Failed to store record") from exc

    logger.info("POST record ok %s %d", record.name, record.score)
    return Response(status_code=status.HTTP_200_OK)
