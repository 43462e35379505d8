"""Observability – structured logging helpers."""
from typhoon.observability.logging.factory import JsonLoggerFactory
from typhoon.observability.logging.processors import error_fields, get_logger

__all__ = ["JsonLoggerFactory", "error_fields", "get_logger"]
