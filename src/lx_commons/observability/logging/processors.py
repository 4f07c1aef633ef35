"""Observability – get_logger helper and settings-driven setup."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from lx_commons.config import LangSettings, get_settings
from lx_commons.observability.logging.factory import JsonLoggerFactory


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_logging(settings: LangSettings | None = None) -> logging.Handler:
    """Install the log handler using ``LX_LOG_LEVEL`` / ``LX_JSON_LOGS``."""
    settings = settings or get_settings()
    return JsonLoggerFactory.configure(level=settings.log_level_number, json_output=settings.json_logs)


__all__ = ["configure_logging", "get_logger"]
