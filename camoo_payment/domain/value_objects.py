from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from camoo_payment.domain.enums import Currency
from camoo_payment.domain.validation import Amount, to_invalid_argument


class Money(BaseModel):
    """Amount paired with its currency. Display/transport value only, no arithmetic."""

    model_config = ConfigDict(frozen=True)

    amount: Amount
    currency: Currency

    def __init__(self, *args: Any, **data: Any) -> None:
        # Money(1000, "XAF") as well as Money(amount=1000, currency="XAF")
        data.update(zip(("amount", "currency"), args))
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise to_invalid_argument(e, "Money") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
