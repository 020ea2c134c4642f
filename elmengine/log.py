"""The engine's two loggers: core and client."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_CORE_NAME = "[ELM]"
_CLIENT_NAME = "[APP]"
_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_loggers: dict[str, logging.Logger] = {}


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init() -> None:
    """Set up both loggers to write every level to standard output."""
    _loggers["core"] = _configure(_CORE_NAME)
    _loggers["client"] = _configure(_CLIENT_NAME)


def core_logger() -> logging.Logger | None:
    """The engine's logger, or None before init()."""
    return _loggers.get("core")


def client_logger() -> logging.Logger | None:
    """The application's logger, or None before init()."""
    return _loggers.get("client")