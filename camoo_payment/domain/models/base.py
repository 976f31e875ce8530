from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from camoo_payment.domain.validation import to_invalid_argument

M = TypeVar("M", bound=BaseModel)


class Model(Protocol):
    """Contract shared by the API models: build from decoded JSON, dump back to a dict."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Model": ...

    def to_dict(self) -> dict[str, Any]: ...

    def to_json(self) -> str: ...


def validate(
    model_cls: type[M],
    data: Mapping[str, Any],
    wire_names: Mapping[str, str] | None = None,
) -> M:
    """model_validate, with pydantic errors raised as InvalidArgumentError."""
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise to_invalid_argument(e, model_cls.__name__, wire_names) from e
