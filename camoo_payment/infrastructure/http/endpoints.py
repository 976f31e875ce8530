from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    """Remote operations and the path segment each one is served under."""

    ACCOUNT = "/account"
    CASH_OUT = "/cashout"
    VERIFY = "/verify"

    @property
    def path(self) -> str:
        return self.value
