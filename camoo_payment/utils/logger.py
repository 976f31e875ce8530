"""
Logging for the Camoo payment client.

Library modules only emit records on the `camoo_payment` logger. Applications
that want them on stderr or in a file call `setup_logger` once.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "camoo_payment"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# marks handlers attached by setup_logger so a second call is a no-op
_OWNED = "_camoo_payment_handler"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """
    Attach a stderr handler, and a file handler when `log_file` is given.

    Idempotent: once handlers have been attached, later calls return the logger
    unchanged.
    """
    log = logging.getLogger(name)
    if any(getattr(h, _OWNED, False) for h in log.handlers):
        return log

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for h in handlers:
        h.setFormatter(fmt)
        setattr(h, _OWNED, True)
        log.addHandler(h)
    log.setLevel(level)
    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
