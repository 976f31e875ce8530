"""Closed vocabularies reported by the payment API."""

from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    EUR = "EUR"
    USD = "USD"
    XAF = "XAF"
    XOF = "XOF"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]


class Status(str, Enum):
    """Payment states as labelled by the server. The client does not enforce transitions."""

    CREATED = "CREATED"
    INITIALISED = "INITIALISED"
    IN_PROGRESS = "IN_PROGRESS"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"
    CANCELED = "CANCELED"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @property
    def is_final(self) -> bool:
        return self in (Status.CONFIRMED, Status.FAILED, Status.CANCELED)
