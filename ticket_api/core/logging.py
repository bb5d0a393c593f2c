"""Logging setup for the Ticket API."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from ticket_api.core.config import Settings

# Server loggers that should go through the application handler.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _logging_config(level: int, fmt: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"ticket": {"format": fmt}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "ticket",
                "level": level,
            }
        },
        "loggers": {name: {"handlers": [], "propagate": True} for name in _SERVER_LOGGERS},
        "root": {"handlers": ["console"], "level": level},
    }


def configure_logging(settings: Settings) -> logging.Logger:
    """Route all records through one console handler and return the app logger."""

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    dictConfig(_logging_config(level, settings.log_format))

    logger = logging.getLogger("ticket_api")
    logger.setLevel(level)
    return logger
