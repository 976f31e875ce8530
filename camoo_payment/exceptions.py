"""Errors raised by the Camoo payment client."""

from __future__ import annotations

from typing import Any

INVALID_ARGUMENT_PREFIX = "CAMOO API Invalid Argument: "
UNKNOWN_ERROR = "Unknown error"


class CamooPaymentError(Exception):
    """Base class for every error raised by this package."""


class ApiError(CamooPaymentError):
    """Raised when the payment API answers with a status code other than 200."""

    def __init__(
        self,
        message: str = UNKNOWN_ERROR,
        code: int = 0,
        body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.body = body or {}

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.code})" if self.code else self.message


class InvalidResponseError(CamooPaymentError):
    """Raised when a successful response does not have the expected shape."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class InvalidArgumentError(CamooPaymentError, ValueError):
    """Raised when a model cannot be built from the given data."""

    def __init__(self, message: str = "", field: str | None = None) -> None:
        super().__init__((INVALID_ARGUMENT_PREFIX + message).strip())
        self.field = field


class TransportError(CamooPaymentError):
    """Raised when the HTTP exchange itself fails (connection, timeout)."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original
