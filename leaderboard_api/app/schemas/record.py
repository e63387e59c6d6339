"""
Pydantic schema for leaderboard records.

A record is a bare name/score pair.  On the wire the fields are
spelled ``Name`` and ``Score``; the lower-case attribute names are
accepted on input as well.  Decoding is strict: unknown or missing
fields are rejected and no coercion happens between strings, floats,
booleans and integers, and scores beyond the 64-bit range of the
storage column do not decode.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Largest value an SQLite INTEGER column can hold.
MAX_SCORE = 2**63 - 1


class Record(BaseModel):
    """One leaderboard entry."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    name: StrictStr = Field(..., alias="Name", description="Player name")
    score: StrictInt = Field(..., alias="Score", le=MAX_SCORE, description="Score achieved")
