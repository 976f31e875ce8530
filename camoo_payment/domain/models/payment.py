"""
Payment resource returned by the cash-out and verify operations.

The API is inconsistent about key casing, so aliased fields accept the
camelCase key first and fall back to the snake_case one.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, model_validator

from camoo_payment.domain.enums import Status
from camoo_payment.domain.models.base import validate
from camoo_payment.domain.validation import Amount, UtcDatetime, WireString, format_datetime, nest_money
from camoo_payment.domain.value_objects import Money
from camoo_payment.exceptions import InvalidArgumentError

# attribute name -> key used on the wire (and in error messages)
WIRE_NAMES = {
    "created_at": "createdAt",
    "net_amount": "netAmount",
    "completed_at": "completedAt",
    "notified_at": "notifiedAt",
    "phone_number": "phoneNumber",
}


def _aliased(wire_name: str, snake_name: str, **kwargs: Any) -> Any:
    return Field(
        validation_alias=AliasChoices(wire_name, snake_name),
        serialization_alias=wire_name,
        **kwargs,
    )


class Payment(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: WireString
    amount: Money
    created_at: UtcDatetime = _aliased("createdAt", "created_at")
    network: WireString
    status: WireString
    fees: Amount | None = None
    net_amount: Amount | None = _aliased("netAmount", "net_amount", default=None)
    completed_at: UtcDatetime | None = _aliased("completedAt", "completed_at", default=None)
    notified_at: UtcDatetime | None = _aliased("notifiedAt", "notified_at", default=None)
    phone_number: WireString | None = _aliased("phoneNumber", "phone_number", default=None)
    country: WireString | None = None

    @model_validator(mode="before")
    @classmethod
    def _nest_amount(cls, data: Any) -> Any:
        return nest_money(data, "amount")

    @field_serializer("created_at", "completed_at", "notified_at")
    def _serialize_datetime(self, value: datetime | None) -> str | None:
        return format_datetime(value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Payment":
        """
        Build a Payment from the mapping nested under `cashOut` or `verify`.

        Required: id, amount, currency, createdAt, network, status. A missing
        field is reported before any malformed one. `id` is kept as a string
        whatever its wire type; dates may be UNIX timestamps or ISO-8601 strings
        and end up in UTC. `status` is stored as sent.

        Raises:
            InvalidArgumentError: Naming the missing or malformed field.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("Payment data must be a mapping.", field=None)
        return validate(cls, data, WIRE_NAMES)

    @property
    def status_enum(self) -> Status | None:
        """The matching Status member, or None when the server sent another label."""
        try:
            return Status(self.status.upper())
        except ValueError:
            return None

    @property
    def is_final(self) -> bool:
        status = self.status_enum
        return status is not None and status.is_final

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
