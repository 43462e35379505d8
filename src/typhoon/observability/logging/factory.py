"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from typhoon.observability.logging.processors import error_fields


class JsonLoggerFactory:
    """Configure structlog for JSON output.

    Records emitted through the standard :mod:`logging` module (which is what
    the retry loop uses) are rendered by the same processor chain, so
    ``retry.scheduled attempt=2 delay=400000000ns`` lands as one JSON line.
    """

    @staticmethod
    def configure(level: int = logging.INFO, *, logger_names: tuple[str, ...] = ()) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            error_fields,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)


__all__ = ["JsonLoggerFactory"]
