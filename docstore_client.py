"""DocStore API client.

A small wrapper around the DocStore HTTP API built on ``requests``.
Every public method returns a ``(data, error)`` tuple: on success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  Transport
failures (connection refused, timeouts) are reported the same way
with ``status_code`` set to ``None``.

Typical use::

    client = DocStoreClient(base_url="http://localhost:8080")
    client.login("admin", "secret")
    client.create_document({"id": "1", "name": "Intro", "description": ""})
    doc, error = client.get_document("1")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

Error = Dict[str, Any]


class DocStoreClient:
    """Client for the DocStore API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server URL, e.g. ``http://localhost:8080``.
            token: Optional bearer token.  ``login`` sets it as well.
            session: Optional requests session; one is created if omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``base_url + path``.

        Returns ``(parsed_json_or_None, None)`` on success and
        ``(None, error)`` on failure.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = self._error_message(exc.response.json())
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(err_json: Any) -> str:
        """Flatten an error body into a single string.

        Validation failures carry a list of error objects in ``detail``;
        their ``msg`` entries are joined.
        """
        if not isinstance(err_json, dict):
            return str(err_json)
        detail = err_json.get("detail") or err_json.get("error")
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list):
            return "; ".join(
                item.get("msg", str(item)) if isinstance(item, dict) else str(item) for item in detail
            )
        return str(detail if detail is not None else err_json)

    @staticmethod
    def _document_path(document_id: str) -> str:
        return f"{API_PREFIX}/documents/{quote(str(document_id), safe='')}"

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[Optional[str], Optional[Error]]:
        """Log in and remember the returned token for later calls."""
        data, error = self._request(
            "POST", f"{API_PREFIX}/auth/login", json_body={"username": username, "password": password}
        )
        if error:
            return None, error
        self.token = data.get("token") if isinstance(data, dict) else None
        return self.token, None

    # ------------------------------------------------------------------
    # Document operations
    # ------------------------------------------------------------------
    def list_documents(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"{API_PREFIX}/documents")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_document(self, document_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._document_path(document_id))

    def create_document(self, document: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"{API_PREFIX}/documents", json_body=document)

    def replace_document(
        self, document_id: str, document: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all mutable fields of a document (PUT)."""
        return self._request("PUT", self._document_path(document_id), json_body=document)

    def patch_document(
        self, document_id: str, updates: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update only the given fields of a document (PATCH)."""
        return self._request("PATCH", self._document_path(document_id), json_body=updates)

    def delete_document(self, document_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._document_path(document_id))
        return error is None, error
