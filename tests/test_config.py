"""
Tests for environment configuration accessors.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from camoo_payment.utils import config

_load_config = config.load_config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env out of the tests."""
    monkeypatch.setattr(config, "load_config", lambda: None)
    for key in (
        "CAMOO_PAYMENT_API_KEY",
        "CAMOO_PAYMENT_API_SECRET",
        "CAMOO_PAYMENT_API_VERSION",
        "CAMOO_PAYMENT_DEBUG",
        "CAMOO_PAYMENT_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)


def test_required_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValueError, match="CAMOO_PAYMENT_API_KEY"):
        config.api_key()


def test_required_present(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAMOO_PAYMENT_API_KEY", "  key ")
    monkeypatch.setenv("CAMOO_PAYMENT_API_SECRET", "secret")
    assert config.api_key() == "key"
    assert config.api_secret() == "secret"


def test_defaults() -> None:
    assert config.api_version() == "v1"
    assert config.debug_enabled() is False
    assert config.request_timeout() == 30


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("no", False), ("0", False)])
def test_debug_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("CAMOO_PAYMENT_DEBUG", raw)
    assert config.debug_enabled() is expected


def test_invalid_timeout_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAMOO_PAYMENT_TIMEOUT", "soon")
    assert config.request_timeout() == 30
    monkeypatch.setenv("CAMOO_PAYMENT_TIMEOUT", "5")
    assert config.request_timeout() == 5


def test_dotenv_loaded_from_working_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """.env is found from the working directory and wins over exported values."""
    (tmp_path / ".env").write_text("CAMOO_PAYMENT_API_VERSION=v9\n", encoding="utf-8")
    nested = tmp_path / "app"
    nested.mkdir()
    monkeypatch.chdir(nested)
    monkeypatch.setenv("CAMOO_PAYMENT_API_VERSION", "v1")

    _load_config()

    assert config.api_version() == "v9"
