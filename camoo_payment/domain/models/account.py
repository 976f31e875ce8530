"""
Account balance snapshot returned by GET /account.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from camoo_payment.domain.models.base import validate
from camoo_payment.domain.validation import UtcDatetime, format_datetime, nest_money
from camoo_payment.domain.value_objects import Money
from camoo_payment.exceptions import InvalidArgumentError

WRAPPER_KEY = "account"


class Account(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    balance: Money
    viewed_at: UtcDatetime = Field(validation_alias="date", serialization_alias="viewedAt")

    @model_validator(mode="before")
    @classmethod
    def _nest_balance(cls, data: Any) -> Any:
        return nest_money(data, "balance")

    @field_serializer("viewed_at")
    def _serialize_viewed_at(self, value: datetime) -> str | None:
        return format_datetime(value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        """
        Build an Account from the decoded response body.

        Expects `data["account"]` to be a mapping with `amount` (numeric),
        `currency` (a Currency code) and `date` (ISO-8601 string or UNIX
        timestamp). The date is normalized to UTC.

        Raises:
            InvalidArgumentError: If the sub-mapping or any of its fields is missing or invalid.
        """
        account = data.get(WRAPPER_KEY) if isinstance(data, Mapping) else None
        if not isinstance(account, Mapping):
            raise InvalidArgumentError(
                f"Missing required field '{WRAPPER_KEY}' for Account creation.",
                field=WRAPPER_KEY,
            )
        return validate(cls, account)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
