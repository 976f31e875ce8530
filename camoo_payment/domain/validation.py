"""
Pydantic field types for decoding loosely typed API payloads, and the
translation of pydantic errors into InvalidArgumentError.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, FiniteFloat, ValidationError

from camoo_payment.exceptions import InvalidArgumentError


def _number(value: Any) -> Any:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, str):
        return value.strip()
    return value


def _wire_string(value: Any) -> Any:
    """Identifiers and phone numbers arrive as JSON numbers from some endpoints."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _is_number_string(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def _unix_seconds(value: Any) -> Any:
    """Numbers (and numeric strings) are UNIX seconds; anything else is left for pydantic to parse."""
    if isinstance(value, bool):
        raise ValueError("must be a date/time, not a boolean")
    if isinstance(value, (int, float, Decimal)) or (isinstance(value, str) and _is_number_string(value)):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"is not a valid UNIX timestamp: {value!r}") from e
    return value


def _as_utc(value: datetime) -> datetime:
    # naive date strings are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


Amount = Annotated[FiniteFloat, BeforeValidator(_number)]
WireString = Annotated[str, BeforeValidator(_wire_string)]
UtcDatetime = Annotated[datetime, BeforeValidator(_unix_seconds), AfterValidator(_as_utc)]


def format_datetime(value: datetime | None) -> str | None:
    """ISO-8601 with explicit offset, e.g. 2024-05-01T10:00:00+00:00."""
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat(timespec="seconds")


def drop_nulls(data: Mapping[str, Any]) -> dict[str, Any]:
    """A key set to null counts as absent, so alias fallback and required checks see through it."""
    return {k: v for k, v in data.items() if v is not None}


def nest_money(data: Any, key: str) -> Any:
    """Move the flat `amount`/`currency` pair of a payload under `key` as a Money mapping."""
    if not isinstance(data, Mapping):
        return data
    data = drop_nulls(data)
    if "currency" not in data and isinstance(data.get(key), (Mapping, BaseModel)):
        return data
    money = {k: data.pop(k) for k in ("amount", "currency") if k in data}
    data[key] = money
    return data


def to_invalid_argument(
    error: ValidationError,
    model: str,
    wire_names: Mapping[str, str] | None = None,
) -> InvalidArgumentError:
    """
    Turn a pydantic ValidationError into an InvalidArgumentError naming one field.

    A missing field wins over a malformed one, so absent required data is
    reported first. `wire_names` maps attribute names to the keys the API uses.
    """
    errors = error.errors()
    first = next((e for e in errors if e["type"] == "missing"), errors[0])
    loc = first.get("loc") or ()
    name = str(loc[-1]) if loc else None
    if name is not None and wire_names:
        name = wire_names.get(name, name)

    if first["type"] == "missing":
        return InvalidArgumentError(f"Missing required field '{name}' for {model} creation.", field=name)
    return InvalidArgumentError(f"Invalid value for field '{name}' of {model}: {first['msg']}.", field=name)
