"""Positions API client.

A thin wrapper around the REST routes of the Positions API, built on
the ``requests`` library.  Every method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for listings) and ``error`` is a
dictionary with ``status_code`` and ``message``.

The module doubles as a small command line tool::

    python positions_client.py --base-url http://localhost:8000 list
    python positions_client.py create ENG1 Engineer
    python positions_client.py update 1 --name "Senior Engineer"
    python positions_client.py delete 1

``--base-url`` defaults to the ``POSITIONS_API_URL`` environment
variable.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PositionsClient:
    """Client for the ``/positions`` routes of a running service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``
                or ``http://localhost:8000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
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
            # A Response with an error status is falsy, compare with None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Position operations
    # ------------------------------------------------------------------
    def list_positions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/positions")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_position(self, position_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/positions/{position_id}")

    def create_position(
        self, position_code: str, position_name: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a position.

        The returned record has ``position_id``, ``position_code``,
        ``position_name`` and ``id`` but no timestamps.
        """
        payload = {"position_code": position_code, "position_name": position_name}
        return self._request("POST", "/positions", json_body=payload)

    def update_position(
        self,
        position_id: Any,
        *,
        position_code: Optional[str] = None,
        position_name: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the given fields of a position.  Omitted fields are left as is."""
        payload: Dict[str, Any] = {}
        if position_code is not None:
            payload["position_code"] = position_code
        if position_name is not None:
            payload["position_name"] = position_name
        return self._request("PUT", f"/positions/{position_id}", json_body=payload)

    def delete_position(self, position_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/positions/{position_id}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Call a running Positions API.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("POSITIONS_API_URL", "http://localhost:8000"),
        help="Service base URL (default: $POSITIONS_API_URL or http://localhost:8000)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all positions")

    get_p = sub.add_parser("get", help="Show one position")
    get_p.add_argument("position_id")

    create_p = sub.add_parser("create", help="Create a position")
    create_p.add_argument("code")
    create_p.add_argument("name")

    update_p = sub.add_parser("update", help="Update a position")
    update_p.add_argument("position_id")
    update_p.add_argument("--code", help="New position code")
    update_p.add_argument("--name", help="New position name")

    delete_p = sub.add_parser("delete", help="Delete a position")
    delete_p.add_argument("position_id")
    return ap


def main(argv: Optional[Sequence[str]] = None, client: Optional[PositionsClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or PositionsClient(base_url=args.base_url)

    if args.command == "list":
        data, error = client.list_positions()
    elif args.command == "get":
        data, error = client.get_position(args.position_id)
    elif args.command == "create":
        data, error = client.create_position(args.code, args.name)
    elif args.command == "update":
        data, error = client.update_position(
            args.position_id, position_code=args.code, position_name=args.name
        )
    else:
        data, error = client.delete_position(args.position_id)

    if error:
        print(f"[!] {error['message']} (status {error['status_code']})", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
