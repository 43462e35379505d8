"""Observability – structured logging setup."""
from typhoon.observability.logging import JsonLoggerFactory, error_fields, get_logger

__all__ = ["JsonLoggerFactory", "error_fields", "get_logger"]
