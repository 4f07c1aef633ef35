"""Observability – structured logging helpers."""
from lx_commons.observability.logging.factory import JsonLoggerFactory
from lx_commons.observability.logging.processors import configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
