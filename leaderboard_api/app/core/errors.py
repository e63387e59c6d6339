"""
Error taxonomy for the leaderboard service.

Each error carries the HTTP status it maps to and the message that is
safe to show to the client.  Internal detail (driver errors, bad
payloads) goes to the log, never into the response body.
"""


class LeaderboardError(Exception):
    """Base class for errors rendered as plain-text HTTP responses.

    ``detail`` is for the log; ``message`` is the response body and is
    empty unless a handler sets a generic one.
    """

    status_code: int = 500

    def __init__(self, detail: str = "", message: str = "") -> None:
        super().__init__(detail or message)
        self.detail = detail
        self.message = message


class ValidationError(LeaderboardError):
    """Client input was malformed or failed the record checks."""

    status_code = 400


class StorageError(LeaderboardError):
    """The database connection, query or write failed."""

    status_code = 500


class SerializationError(LeaderboardError):
    """A response body could not be encoded."""

    status_code = 500
