"""Menu catalog API client.

A thin wrapper around the menu endpoints using the ``requests``
library.  Every method returns a tuple ``(data, error)``: on success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
list for listings) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Validation failures additionally
carry the server's ``errors`` list.

The server may report validation failures with HTTP 200, so the client
inspects the body for an ``errors`` key instead of trusting the status
code alone.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class MenuCatalogClient:
    """Client for a running Menu Catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server address, e.g. ``http://localhost:3000``.
            api_prefix: Prefix under which the menu router is mounted.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and normalise the outcome.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/menu/1``).
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None

        if isinstance(data, dict) and "errors" in data:
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in data["errors"]]
            logger.warning("Menu payload rejected: %s", "; ".join(messages))
            return None, {
                "status_code": response.status_code,
                "message": "; ".join(messages),
                "errors": data["errors"],
            }
        if response.status_code >= 400:
            message = ""
            if isinstance(data, dict):
                message = data.get("error") or data.get("detail") or ""
            message = str(message or response.text or response.reason)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return data, None

    # ------------------------------------------------------------------
    # Menu operations
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the whole menu in catalog order."""
        data, error = self._request("GET", "/menu")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def list_categories(self) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        """Retrieve the allowed values of ``category``."""
        data, error = self._request("GET", "/menu/categories")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_item(self, item_id: int) -> Result:
        """Retrieve a single menu item by ID."""
        return self._request("GET", f"/menu/{item_id}")

    def create_item(self, payload: Dict[str, Any]) -> Result:
        """Create a menu item; ``payload`` must not contain ``id``."""
        return self._request("POST", "/menu", json_body=payload)

    def update_item(self, item_id: int, changes: Dict[str, Any]) -> Result:
        """Send a partial update containing only the fields to change."""
        return self._request("PUT", f"/menu/{item_id}", json_body=changes)

    def delete_item(self, item_id: int) -> Result:
        """Delete an item and return the removed entry."""
        data, error = self._request("DELETE", f"/menu/{item_id}")
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("item"), None
        return None, None
