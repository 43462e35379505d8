"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Port: monotonic clock used to measure elapsed time and deadlines."""

    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock that delegates to ``time.monotonic``."""

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """Test clock pinned to a fixed reading until advanced explicitly."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def monotonic(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the frozen reading forward by *seconds*."""
        if seconds < 0:
            raise ValueError("FrozenClock cannot move backwards")
        self._now += seconds


__all__ = ["Clock", "FrozenClock", "SystemClock"]
