"""
Tests for setup_logger / get_logger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from camoo_payment.utils.logger import LOGGER_NAME, get_logger, setup_logger


@pytest.fixture
def logger_name(request: pytest.FixtureRequest) -> Iterator[str]:
    name = f"{LOGGER_NAME}.test.{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()


def test_library_logger_has_no_output_handlers() -> None:
    """Importing the package never attaches stderr/file handlers."""
    handlers = get_logger().handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
    assert not any(isinstance(h, logging.StreamHandler) for h in handlers)


def test_setup_logger_writes_to_file(logger_name: str, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "camoo.log"
    log = setup_logger(logger_name, level=logging.DEBUG, log_file=log_file)
    log.info("cash-out %s created", "TX1")
    for h in log.handlers:
        h.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "| INFO |" in content
    assert "cash-out TX1 created" in content
    assert log.level == logging.DEBUG


def test_setup_logger_is_idempotent(logger_name: str, tmp_path: Path) -> None:
    log = setup_logger(logger_name, log_file=tmp_path / "a.log")
    count = len(log.handlers)
    again = setup_logger(logger_name, level=logging.ERROR, log_file=tmp_path / "b.log")
    assert again is log
    assert len(again.handlers) == count == 2
    assert again.level == logging.INFO
    assert not (tmp_path / "b.log").exists()
