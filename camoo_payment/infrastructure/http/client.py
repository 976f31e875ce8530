"""
Authenticated HTTP client for the Camoo payment API.

Builds URIs and headers, hands the request to a Transport, and turns the
response into a decoded body or an ApiError.
"""

from __future__ import annotations

import platform
import threading
from typing import Any
from urllib.parse import urlencode

from camoo_payment.exceptions import (
    UNKNOWN_ERROR,
    ApiError,
    InvalidArgumentError,
    InvalidResponseError,
)
from camoo_payment.infrastructure.http.endpoints import Endpoint
from camoo_payment.infrastructure.http.transport import RequestsTransport, Response, Transport
from camoo_payment.utils import config
from camoo_payment.utils.logger import get_logger

logger = get_logger()

BASE_URL = "https://api.camoo.cm/{version}/payment"
DEFAULT_API_VERSION = config.DEFAULT_API_VERSION
HTTP_OK = 200


def _decode_body(response: Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class Client:
    """
    Sends requests to the payment API.

    The transport is created lazily, at most once per client, unless one was
    injected. Calls are sequential: one request per operation, no retries.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        transport: Transport | None = None,
        debug: bool = False,
        api_version: str | None = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise InvalidArgumentError("API key must not be empty.", field="api_key")
        if not isinstance(api_secret, str) or not api_secret.strip():
            raise InvalidArgumentError("API secret must not be empty.", field="api_secret")
        self._api_key = api_key
        self._api_secret = api_secret
        self._transport = transport
        self._owns_transport = transport is None
        self._transport_lock = threading.Lock()
        self.debug = debug
        self.api_version = api_version or DEFAULT_API_VERSION

    @classmethod
    def create(
        cls,
        api_key: str,
        api_secret: str,
        debug: bool = False,
        api_version: str | None = None,
    ) -> "Client":
        """Client that will build its own default transport on first use."""
        return cls(api_key, api_secret, None, debug, api_version)

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> "Client":
        """Client configured from CAMOO_PAYMENT_* environment variables (or .env)."""
        return cls(
            config.api_key(),
            config.api_secret(),
            transport,
            debug=config.debug_enabled(),
            api_version=config.api_version(),
        )

    @property
    def base_uri(self) -> str:
        return BASE_URL.format(version=self.api_version)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-Api-Key": self._api_key,
            "X-Api-Secret": self._api_secret,
            "X-Api-Version": self.api_version,
            "X-Api-Debug": "true" if self.debug else "false",
            "X-Python-Version": platform.python_version(),
        }

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            with self._transport_lock:
                if self._transport is None:
                    logger.debug("Creating default transport (debug=%s)", self.debug)
                    self._transport = RequestsTransport(debug=self.debug)
        return self._transport

    def close(self) -> None:
        """Close the default transport if this client created one. Injected transports are left alone."""
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def build_uri(self, endpoint: Endpoint, params: dict[str, Any] | None = None) -> str:
        uri = self.base_uri + endpoint.path
        if params:
            return uri + "?" + urlencode(params, doseq=True)
        return uri

    def get(self, endpoint: Endpoint, params: dict[str, Any] | None = None) -> Response:
        """Send a GET request; returns the raw transport response."""
        uri = self.build_uri(endpoint, params)
        logger.info("GET %s", uri)
        return self.transport.get(uri, self.headers)

    def post(self, endpoint: Endpoint, body: dict[str, Any]) -> Response:
        """Send a POST request with a JSON body; returns the raw transport response."""
        uri = self.build_uri(endpoint)
        logger.info("POST %s", uri)
        return self.transport.post(uri, body, self.headers)

    def handle_response(self, response: Response) -> dict[str, Any]:
        """
        Return the decoded JSON body of a 200 response.

        Raises:
            ApiError: If the status code is not 200. Carries the body's `message`
                (or "Unknown error") and the status code.
            InvalidResponseError: If a 200 body is not a JSON object.
        """
        status_code = response.status_code
        body = _decode_body(response)

        if status_code != HTTP_OK:
            payload = body if isinstance(body, dict) else {}
            message = payload.get("message")
            if message is None:
                message = UNKNOWN_ERROR
            logger.warning("Payment API responded %s: %s", status_code, message)
            raise ApiError(str(message), status_code, payload)

        if not isinstance(body, dict):
            logger.warning("Payment API returned a non-object body with status %s", status_code)
            raise InvalidResponseError("Invalid JSON object in response")
        return body
