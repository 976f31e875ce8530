"""Load and validate environment variables. Uses python-dotenv.

Callers should use the accessor functions below rather than reading `os.environ`
directly, so credentials and client options are resolved in one place.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT_SECONDS = 30

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def load_config() -> None:
    """
    Load the nearest .env, searching upward from the working directory.
    Idempotent; safe to call multiple times. Uses override=True so .env values
    take precedence over existing env vars.
    """
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=True)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_optional_bool(key: str, default: bool = False) -> bool:
    """Get optional env var as bool (1/true/yes/on); return default if missing."""
    raw = get_optional(key)
    if not raw:
        return default
    return raw.lower() in _TRUTHY


# --- Public config accessors ---

def api_key() -> str:
    """Required: Camoo payment API key."""
    return get_required("CAMOO_PAYMENT_API_KEY")


def api_secret() -> str:
    """Required: Camoo payment API secret."""
    return get_required("CAMOO_PAYMENT_API_SECRET")


def api_version() -> str:
    """Optional: API version path segment. Default v1."""
    return get_optional("CAMOO_PAYMENT_API_VERSION", DEFAULT_API_VERSION)


def debug_enabled() -> bool:
    """Optional: send X-Api-Debug=true and log verbosely. Default off."""
    return get_optional_bool("CAMOO_PAYMENT_DEBUG", False)


def request_timeout() -> int:
    """Optional: per-request timeout in seconds for the default transport. Default 30."""
    return get_optional_int("CAMOO_PAYMENT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
