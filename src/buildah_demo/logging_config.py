"""Process-wide logging setup."""

from __future__ import annotations

import logging

LOGGER_NAME = "buildah_demo"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def _parse_level(value: str | int | None) -> int:
    if isinstance(value, int):
        return value
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | int | None = "INFO", *, force: bool = False) -> logging.Logger:
    """Configure the root logger once and return the package logger.

    uvicorn is started with ``log_config=None`` so its own loggers
    propagate here instead of installing a second set of handlers.
    Calling this again is a no-op unless *force* is true.
    """
    logging.basicConfig(level=_parse_level(level), format=LOG_FORMAT, force=force)
    return logging.getLogger(LOGGER_NAME)
