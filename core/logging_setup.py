"""Logging configuration for SubSpend entrypoints.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, once, by whatever process hosts the engine.
No package function calls :func:`configure_logging`; a host script or
service does so at startup::

    from core.logging_setup import configure_logging
    from core.statistics_service import prepare_statistics

    configure_logging()
    stats = prepare_statistics("subscriptions.csv", "1year")
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from config.settings import get_settings

__all__ = ["PROJECT_LOGGERS", "configure_logging"]

PROJECT_LOGGERS: tuple[str, ...] = ("analytics", "core", "data")

_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_configured = False


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name)
    if isinstance(numeric, int):
        return numeric
    raise ValueError(f"Unknown log level: {level!r}")


def configure_logging(level: int | str | None = None, *, stream: IO[str] = sys.stderr) -> None:
    """Attach a single stream handler to each project logger.

    Subsequent calls only adjust the level.
    """

    global _configured
    resolved = _resolve_level(level)

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if _configured:
            continue
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _configured = True
