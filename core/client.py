"""Base HTTP client for the provider's REST API.

Turns an operation object (anything with ``op()`` and, for bodies,
``to_json()``) into a single ``requests`` call and decodes the JSON answer.
No retries: callers decide what to do with failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import requests

from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_REQUEST_TIMEOUT,
    USER_AGENT,
    default_base_urls,
)
from .errors import APIError, TransportError
from .operation import Endpoint, Op

LOG = logging.getLogger(__name__)

Timeout = Union[float, Tuple[float, float]]


class _TimeoutSession:
    """Wrap a requests session so every call carries a default timeout."""

    def __init__(self, session: Any, timeout: Timeout) -> None:
        self._session = session
        self._timeout = timeout

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        kwargs.setdefault("timeout", self._timeout)
        return self._session.request(method, url, **kwargs)


class ApiClientBase:
    """Authenticated transport for API and vault endpoints."""

    def __init__(
        self,
        secret_key: str,
        public_key: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: Timeout = DEFAULT_REQUEST_TIMEOUT,
        api_version: Optional[str] = None,
        base_urls: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.secret_key = secret_key
        self.public_key = public_key
        self.api_version = api_version
        self.base_urls: Dict[str, str] = dict(default_base_urls())
        if base_urls:
            self.base_urls.update(base_urls)
        self.session = session or requests.Session()
        self._http = _TimeoutSession(self.session, timeout)

    # -------------------- Internal helpers --------------------
    def _auth(self, endpoint: Endpoint) -> Tuple[str, str]:
        if Endpoint(endpoint) is Endpoint.VAULT:
            if not self.public_key:
                raise TransportError("public key required for vault endpoint")
            return (self.public_key, "")
        return (self.secret_key, "")

    def _headers(self, op: Op) -> Dict[str, str]:
        headers = {"User-Agent": USER_AGENT, "Accept": CONTENT_TYPE_JSON}
        if op.content_type and op.has_body:
            headers["Content-Type"] = op.content_type
        if self.api_version:
            headers["Omise-Version"] = self.api_version
        return headers

    @staticmethod
    def _encode_body(operation: Any, op: Op) -> Optional[bytes]:
        """Serialize the request body, if the operation has one.

        Runs before any network IO, so encoding errors never reach the wire.
        """
        if op.has_body and hasattr(operation, "to_json"):
            return operation.to_json().encode("utf-8")
        return None

    # -------------------- Public API --------------------
    def do(self, operation: Any) -> Dict[str, Any]:
        """Send one operation and return the decoded JSON body."""
        op: Op = operation.op()
        body = self._encode_body(operation, op)
        url = op.url(self.base_urls)
        LOG.debug("%s %s", op.method.upper(), url)
        try:
            resp = self._http.request(
                op.method.upper(),
                url,
                params=dict(op.values) or None,
                data=body,
                headers=self._headers(op),
                auth=self._auth(op.endpoint),
            )
        except requests.RequestException as exc:
            raise TransportError(f"{op.method.upper()} {url} failed: {exc}") from exc

        if resp.status_code >= 400:
            try:
                err_body = resp.json()
            except ValueError:
                err_body = None
            err = APIError.from_response(resp.status_code, err_body, resp.text)
            LOG.warning("%s %s -> %s", op.method.upper(), url, err)
            raise err
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from {url}: {resp.text[:200]}") from exc
