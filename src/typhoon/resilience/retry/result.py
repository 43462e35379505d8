"""Resilience – RetryResult and the per-call attempt log behind it."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class RetryResult(Generic[T]):
    """Outcome of a successful retry lifecycle.

    Attributes:
        value: Value returned by the successful attempt.
        attempts: Number of times the operation was invoked (>= 1).
        total_duration: Seconds elapsed from just before the first attempt
            to the successful return.
        errors: Errors raised by the failed attempts, oldest first.
    """

    value: T
    attempts: int
    total_duration: float
    errors: tuple[BaseException, ...] = ()


class AttemptLog:
    """Attempt counter and error list for a single ``retry_with_result`` call.

    Never shared between calls.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._attempts = 0
        self._errors: list[BaseException] = []

    async def record_attempt(self) -> None:
        async with self._lock:
            self._attempts += 1

    async def record_error(self, error: BaseException) -> None:
        async with self._lock:
            self._errors.append(error)

    async def build(self, value: T, total_duration: float) -> RetryResult[T]:
        async with self._lock:
            return RetryResult(
                value=value,
                attempts=self._attempts,
                total_duration=max(0.0, total_duration),
                errors=tuple(self._errors),
            )


__all__ = ["AttemptLog", "RetryResult"]
