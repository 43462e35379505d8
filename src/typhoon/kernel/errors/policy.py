"""Retry policy errors – terminal outcomes of a retry lifecycle."""

from __future__ import annotations

from typing import Any

from typhoon.kernel.errors.base import BaseError


class RetryPolicyError(BaseError):
    """A retry loop gave up without producing a value."""

    default_code = "retry_policy_error"

    def __init__(self, message: str, *, attempts: int = 0, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts
        self.detail.setdefault("attempts", attempts)


class RetryLimitExceededError(RetryPolicyError):
    """The strategy's attempt budget ran out before the operation succeeded."""

    default_code = "retry_limit_exceeded"

    def __init__(self, message: str = "Retry limit exceeded", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class DeadlineExceededError(RetryPolicyError):
    """The total time budget for the retry lifecycle has elapsed.

    Reported even when the strategy still has attempts left.
    """

    default_code = "deadline_exceeded"

    def __init__(
        self,
        message: str = "Total retry duration exceeded",
        *,
        elapsed_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.elapsed_seconds = elapsed_seconds
        if elapsed_seconds is not None:
            self.detail.setdefault("elapsed_seconds", elapsed_seconds)


__all__ = ["DeadlineExceededError", "RetryLimitExceededError", "RetryPolicyError"]
