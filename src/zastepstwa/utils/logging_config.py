"""Logging setup shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from zastepstwa.config import ZASTEPSTWA_LOG_LEVEL

_ROOT_LOGGER_NAMES = ("zastepstwa", "server", "uvicorn")

# LogRecord attributes that are not user-supplied ``extra`` fields.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if not extras:
            return base
        context = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {context}"


def configure_logging(level: str = ZASTEPSTWA_LOG_LEVEL) -> None:
    """Attach one stdout handler to the project and uvicorn loggers.

    Safe to call more than once; handlers are only added the first time.
    """
    formatter = ExtraFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for name in _ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler(stream=sys.stdout)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
