from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from camoo_payment.exceptions import InvalidResponseError
from camoo_payment.utils.logger import get_logger

logger = get_logger()


def unwrap(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """
    Return the mapping nested under `key` in a decoded response body.

    Raises:
        InvalidResponseError: If `key` is absent or its value is not a mapping.
    """
    value = data.get(key)
    if not isinstance(value, Mapping):
        logger.warning("Response body has no '%s' object (keys: %s)", key, sorted(data))
        raise InvalidResponseError(f"Invalid {key} data in response", key=key)
    return value
