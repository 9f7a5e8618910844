"""
Sensei Admin API client
Query/command interface over the admin HTTP endpoints used by the nodes page.
"""

import logging
from typing import Any, Dict, Optional

import requests

from log_handler import class_logger
from Services.errors import CommandError, FetchError
from Services.models import Node, NodeListing


@class_logger(log_level=logging.DEBUG, log_timing=True)
class SenseiAdminClient:
    """Thin wrapper around the admin API; raises FetchError / CommandError"""

    NODES_PATH = "/api/v1/nodes"
    START_NODE_PATH = "/api/v1/nodes/start"
    STOP_NODE_PATH = "/api/v1/nodes/stop"

    def __init__(self, base_url: str, timeout: float = 15, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def list_nodes(self, page: int, search_term: str, take: int) -> NodeListing:
        """Fetch one page of nodes matching the search term"""
        params = {"page": page, "take": take, "query": search_term}
        try:
            response = self.session.get(self._url(self.NODES_PATH), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Unable to reach admin API: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                f"Listing nodes failed: {self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            nodes = tuple(Node.from_dict(raw) for raw in payload.get("nodes", []))
            pagination = payload.get("pagination") or {}
            has_more = bool(pagination.get("hasMore", pagination.get("has_more", False)))
            total = int(pagination.get("total", len(nodes)))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise FetchError(f"Malformed node listing: {e}") from e

        logging.debug(f"Fetched {len(nodes)} nodes (page={page}, take={take}, total={total})")
        return NodeListing(nodes=nodes, has_more=has_more, total=total)

    def stop_node(self, pubkey: str) -> None:
        """Stop a running node"""
        self._command("stop", self.STOP_NODE_PATH, {"pubkey": pubkey}, pubkey)

    def start_node(self, pubkey: str, passphrase: str) -> None:
        """Start a stopped node; the passphrase unlocks its keys"""
        self._command("start", self.START_NODE_PATH, {"pubkey": pubkey, "passphrase": passphrase}, pubkey)

    def close(self):
        self.session.close()

    def dispose(self):
        self.close()

    def _command(self, command: str, path: str, payload: Dict[str, Any], pubkey: str) -> None:
        try:
            response = self.session.post(self._url(path), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise CommandError(command, pubkey, f"Unable to reach admin API: {e}") from e

        if response.status_code != 200:
            raise CommandError(
                command,
                pubkey,
                f"Failed to {command} node: {self._error_message(response)}",
                status_code=response.status_code,
            )
        logging.info(f"Node {pubkey[:10]}... {command} command accepted")

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _error_message(response) -> str:
        """Extract a readable error from an admin API error response"""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            error = payload.get("error") or payload.get("message")
            if isinstance(error, dict):
                error = error.get("Generic") or next(iter(error.values()), None)
            if error:
                return str(error)

        text = (response.text or "").strip()
        return text[:200] if text else f"HTTP {response.status_code}"
