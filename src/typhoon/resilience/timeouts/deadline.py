"""Resilience – Deadline."""
from __future__ import annotations

import dataclasses

from typhoon.kernel.errors import DeadlineExceededError
from typhoon.kernel.time import Clock, SystemClock


@dataclasses.dataclass(frozen=True)
class Deadline:
    """An absolute point on a monotonic clock after which work must stop."""
    expires_at: float
    clock: Clock = dataclasses.field(default_factory=SystemClock, compare=False, repr=False)

    @classmethod
    def after(cls, seconds: float, clock: Clock | None = None) -> "Deadline":
        clock = clock or SystemClock()
        return cls(expires_at=clock.monotonic() + seconds, clock=clock)

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.expires_at - self.clock.monotonic())

    @property
    def is_expired(self) -> bool:
        return self.clock.monotonic() >= self.expires_at

    def raise_if_expired(self, attempts: int = 0) -> None:
        if self.is_expired:
            raise DeadlineExceededError(attempts=attempts)


__all__ = ["Deadline"]
