# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
HTTP transport shared by all service clients.

Each call is exactly one request/response cycle. Non-2xx responses raise
EslServerError built from the server's error payload; requests exceptions
(connection errors, timeouts) propagate unchanged.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .api import ServerError
from .exceptions import EslServerError
from .serialization import JsonSerializer

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

# Cookie carrying a signer authentication token
SESSION_COOKIE = "ESIGNLIVE_SESSION_ID"


def build_url(base_url: str, template: str, **params: Any) -> str:
    """
    Expand a path template against the base URL.

        build_url("https://host/api", "/packages/{packageId}", packageId="abc")
        -> "https://host/api/packages/abc"
    """
    quoted = {k: quote(str(v), safe="") for k, v in params.items()}
    return base_url + template.format(**quoted)


class RestClient:
    """
    requests.Session wrapper that authenticates with the account API key.

    Args:
        api_key: Account API key, sent as "Authorization: Basic <api_key>"
        serializer: Shared JSON settings (defaults to a fresh JsonSerializer)
        timeout: Request timeout in seconds
        session: Session to use (a new requests.Session by default)
    """

    def __init__(
        self,
        api_key: str,
        serializer: Optional[JsonSerializer] = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.serializer = serializer or JsonSerializer()
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers["Authorization"] = f"Basic {api_key}"
        self.session.headers["Accept"] = "application/json"

    def close(self):
        self.session.close()

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    def get(self, url: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> Any:
        """GET and return the parsed JSON body (None if empty)."""
        resp = self._send("GET", url, params=params, headers=headers)
        return self._safe_json(resp)

    def get_bytes(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        """GET a binary resource (PDF, zip, attachment)."""
        resp = self._send("GET", url, headers=headers)
        return resp.content

    def post(self, url: str, payload: Any = None, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> Any:
        return self._send_json("POST", url, payload, params=params, headers=headers)

    def put(self, url: str, payload: Any = None,
            headers: Optional[Dict[str, str]] = None) -> Any:
        return self._send_json("PUT", url, payload, headers=headers)

    def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        resp = self._send("DELETE", url, headers=headers)
        return self._safe_json(resp)

    def post_multipart(self, url: str, files: Dict[str, Any],
                       data: Optional[Dict[str, str]] = None,
                       headers: Optional[Dict[str, str]] = None) -> Any:
        """
        POST multipart/form-data.

        Args:
            files: Form file parts, e.g. {"file": ("doc.pdf", b"...", "application/pdf")}
            data: Plain form parts, e.g. {"payload": "<json>"}
        """
        resp = self._send("POST", url, files=files, data=data, headers=headers)
        return self._safe_json(resp)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _send_json(self, method: str, url: str, payload: Any, **kwargs) -> Any:
        headers = dict(kwargs.pop("headers", None) or {})
        body = None
        if payload is not None:
            body = self.serializer.dumps(payload)
            headers["Content-Type"] = "application/json"
        resp = self._send(method, url, data=body, headers=headers or None, **kwargs)
        return self._safe_json(resp)

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug("%s %s", method, url)
        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)

        if resp.status_code < 200 or resp.status_code >= 300:
            error = self._server_error(resp)
            logger.warning("%s %s failed: %s", method, url, error)
            raise error
        return resp

    def _server_error(self, resp: requests.Response) -> EslServerError:
        """Translate a non-2xx response into EslServerError."""
        data = self._safe_json(resp)
        if isinstance(data, dict):
            server_error = ServerError.from_dict(data)
        else:
            server_error = ServerError()
        if server_error.code is None:
            server_error.code = resp.status_code

        message = server_error.message or f"HTTP {resp.status_code}"
        return EslServerError(message, server_error, resp.status_code)

    def _safe_json(self, resp: requests.Response) -> Any:
        """
        Parse JSON response safely.

        Returns None when the response has no content or the content is
        not JSON (plain text error pages, empty 200 bodies).
        """
        if not resp.content:
            return None
        try:
            return resp.json()
        except (json.JSONDecodeError, ValueError):
            return None
