"""
Decoding and encoding of leaderboard records.

``parse_record`` is the only way a request body becomes a
:class:`Record`.  It runs in two steps: the body must decode into the
record shape at all, and the decoded record must then have a
non-empty name and a strictly positive score.  Either failure raises
:class:`ValidationError` and nothing reaches the store.

``encode_records`` produces the JSON array returned by the list
endpoint, using the ``Name``/``Score`` wire spelling.
"""

from __future__ import annotations

from typing import Iterable, List

import pydantic
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from leaderboard_api.app.core.errors import SerializationError, ValidationError
from leaderboard_api.app.schemas.record import Record


_RECORD_LIST = TypeAdapter(List[Record])


class RecordService:
    """Stateless helpers shared by the record handlers."""

    @classmethod
    def parse_record(cls, body: bytes) -> Record:
        """Decode and validate a request body.

        Raises
        ------
        ValidationError
            If the body is not a JSON object of the record shape, or if
            the name is empty or the score is not positive.
        """
        try:
            record = Record.model_validate_json(body)
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Failed to unmarshal {body!r}: {exc}") from exc
        if not record.name or record.score <= 0:
            raise ValidationError(
                f"Missing name or non-positive score: name={record.name!r} score={record.score}"
            )
        return record

    @classmethod
    def encode_records(cls, records: Iterable[Record]) -> bytes:
        """Serialise records as a JSON array of ``{"Name", "Score"}`` objects."""
        try:
            return _RECORD_LIST.dump_json(list(records), by_alias=True, warnings="error")
        except PydanticSerializationError as exc:
            raise SerializationError(f"Failed to marshal response: {exc}") from exc
