"""Transport-level errors raised by the adapters around a retried call."""

from __future__ import annotations

from typing import Any

from typhoon.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A single attempt failed at the I/O layer."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """One attempt hit its own I/O timeout.

    Unrelated to the total retry budget, which raises
    :class:`~typhoon.kernel.errors.DeadlineExceededError`.
    """

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """A remote service failed or answered with an error status.

    ``status_code`` is set for HTTP responses and lets failure observers
    tell retryable answers (5xx, 429) from permanent ones.
    """

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)


__all__ = ["ExternalServiceError", "InfrastructureError", "TimeoutError"]
