"""Leaderboard API client.

A thin wrapper around the two leaderboard endpoints:

* :meth:`LeaderboardClient.top_records` – fetch the ten best scores.
* :meth:`LeaderboardClient.submit_record` – submit one name/score pair.

Both return a ``(result, error)`` tuple instead of raising, where
``error`` is ``None`` on success or a dictionary with ``status_code``
and ``message`` keys.  The module doubles as a small command line
tool::

    python leaderboard_client.py submit alice 42
    python leaderboard_client.py top --url http://localhost:8080
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8080"


class LeaderboardClient:
    """Client for the leaderboard HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            prefix: Version prefix the records route is mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (or ``None`` for an empty body) on success.  On failure
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def top_records(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the top records, highest score first.

        Returns:
            A tuple ``(records, error)``.  ``records`` holds
            ``{"Name": ..., "Score": ...}`` dictionaries and is empty on
            failure.
        """
        data, error = self._request("GET", "/records")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": f"Unexpected response: {data!r}"}

    def submit_record(self, name: str, score: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Submit one record.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("POST", "/records", json_body={"Name": name, "Score": score})
        if error:
            return False, error
        return True, None


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Submit and list leaderboard scores.")
    ap.add_argument(
        "--url",
        default=os.getenv("LEADERBOARD_URL", DEFAULT_URL),
        help=f"Base URL of the service (default: $LEADERBOARD_URL or {DEFAULT_URL})",
    )
    sub = ap.add_subparsers(dest="command", required=True)
    submit = sub.add_parser("submit", help="Submit a score")
    submit.add_argument("name", help="Player name")
    submit.add_argument("score", type=int, help="Positive integer score")
    sub.add_parser("top", help="Show the top 10 scores")
    args = ap.parse_args(argv)

    client = LeaderboardClient(base_url=args.url)

    if args.command == "submit":
        ok, error = client.submit_record(args.name, args.score)
        if not ok:
            print(f"[!] Failed to submit score: {error['message']}", file=sys.stderr)
            return 1
        print(f"[+] Stored {args.name}: {args.score}")
        return 0

    records, error = client.top_records()
    if error:
        print(f"[!] Failed to get records: {error['message']}", file=sys.stderr)
        return 1
    for position, record in enumerate(records, start=1):
        print(f"{position:>2}. {record.get('Name')}  {record.get('Score')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
