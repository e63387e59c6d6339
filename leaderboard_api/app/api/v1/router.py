"""
Top‑level router for version 1 of the API.

There is a single path, ``/records``.  GET and POST are dispatched to
the handlers in ``endpoints.records``; any other method is answered
with 405 by the framework (see ``main.http_error_handler`` for the
empty body).
"""

from fastapi import APIRouter, Depends, Request, Response

from leaderboard_api.app.core.db import RecordStore, get_store
from .endpoints import records as records_endpoints

router = APIRouter()


@router.api_route("/records", methods=["GET", "POST"], tags=["records"])
async def records(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    if request.method == "GET":
        return await records_endpoints.list_records(store)
    return await records_endpoints.create_record(request, store)
