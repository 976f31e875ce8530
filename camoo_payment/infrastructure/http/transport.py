"""
HTTP transport used by the payment client.

Anything that implements `Transport` can be injected into `Client`; the default
is `RequestsTransport`, a thin wrapper around a `requests.Session`.
"""

from __future__ import annotations

from typing import Any, Protocol

import requests

from camoo_payment.exceptions import TransportError
from camoo_payment.utils.config import request_timeout
from camoo_payment.utils.logger import get_logger

logger = get_logger()

_MAX_DEBUG_BODY_CHARS = 2000
_REDACTED_HEADERS = frozenset({"x-api-key", "x-api-secret"})


class Response(Protocol):
    status_code: int

    def json(self) -> Any: ...


class Transport(Protocol):
    def get(self, uri: str, headers: dict[str, str]) -> Response: ...

    def post(self, uri: str, body: dict[str, Any], headers: dict[str, str]) -> Response: ...


def _redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: ("***" if k.lower() in _REDACTED_HEADERS else v) for k, v in headers.items()}


class RequestsTransport:
    """
    Default transport built on requests.

    One request per call, no retries. Connection failures and timeouts are
    raised as TransportError; HTTP error statuses are returned untouched for the
    client to interpret.
    """

    def __init__(
        self,
        timeout: int | None = None,
        debug: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else request_timeout()
        self._debug = debug
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def debug(self) -> bool:
        return self._debug

    def close(self) -> None:
        """Close the underlying session, unless it was passed in by the caller."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, uri: str, headers: dict[str, str]) -> requests.Response:
        return self._send("GET", uri, headers)

    def post(self, uri: str, body: dict[str, Any], headers: dict[str, str]) -> requests.Response:
        return self._send("POST", uri, headers, body)

    def _send(
        self,
        method: str,
        uri: str,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
    ) -> requests.Response:
        if self._debug:
            logger.info("%s %s headers=%s body=%s", method, uri, _redact_headers(headers), body)
        try:
            r = self._session.request(
                method,
                uri,
                headers=headers,
                json=body,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s (%s)", method, uri, e, type(e).__name__)
            if isinstance(e, requests.exceptions.Timeout):
                detail = f"Request timed out after {self._timeout} seconds"
            elif isinstance(e, requests.exceptions.ConnectionError):
                detail = "Connection failed: could not reach the payment API"
            else:
                detail = f"{type(e).__name__}: {e}"
            raise TransportError(f"{method} {uri}: {detail}", e) from e

        if self._debug:
            logger.info(
                "%s %s -> %s %s",
                method,
                uri,
                r.status_code,
                (r.text or "")[:_MAX_DEBUG_BODY_CHARS],
            )
        return r
