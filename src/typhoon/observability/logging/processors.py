"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from typhoon.kernel.errors import BaseError


def error_fields(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Flatten an ``error=`` value into loggable fields.

    ``BaseError`` instances contribute ``error_code`` plus their ``detail``
    (``attempts``, ``status_code``, …); any other exception is logged by
    type name and message.
    """
    error = event_dict.pop("error", None)
    if error is None:
        return event_dict
    if isinstance(error, BaseError):
        event_dict.setdefault("error_code", error.code)
        event_dict.setdefault("error", error.message)
        for key, value in error.detail.items():
            event_dict.setdefault(key, value)
    elif isinstance(error, BaseException):
        event_dict.setdefault("error", f"{type(error).__name__}: {error}")
    else:
        event_dict["error"] = error
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["error_fields", "get_logger"]
