"""Resilience – delay strategies.

A delay strategy maps a 0-indexed retry attempt to the number of nanoseconds
to wait before that retry.  ``None`` means no further delay is available and
ends the retry sequence, exactly as if the attempt budget had run out.
"""
from __future__ import annotations

import abc
import dataclasses
import random
from collections.abc import Callable, Sequence

from typhoon.resilience.retry.duration import (
    MAX_NANOSECONDS,
    IntervalLike,
    TimeInterval,
    saturate,
    to_nanoseconds,
)

DEFAULT_MULTIPLIER = 2.0
DEFAULT_JITTER_FACTOR = 0.1
DEFAULT_MAX_INTERVAL = TimeInterval.seconds(60)


class DelayStrategy(abc.ABC):
    """Compute the wait (nanoseconds) before the *attempt*-th retry."""

    @abc.abstractmethod
    def delay(self, attempt: int) -> int | None: ...


def _check_attempt(attempt: int) -> None:
    if attempt < 0:
        raise ValueError(f"attempt must be >= 0, got {attempt}")


@dataclasses.dataclass(frozen=True)
class ConstantDelayStrategy(DelayStrategy):
    """Same delay before every retry."""

    duration: IntervalLike

    def delay(self, attempt: int) -> int | None:  # noqa: ARG002
        return to_nanoseconds(self.duration) or 0


@dataclasses.dataclass(frozen=True)
class LinearDelayStrategy(DelayStrategy):
    """Delay grows linearly: ``duration * (attempt + 1)``."""

    duration: IntervalLike

    def delay(self, attempt: int) -> int | None:
        _check_attempt(attempt)
        nanos = to_nanoseconds(self.duration) or 0
        return min(nanos * (attempt + 1), MAX_NANOSECONDS)


@dataclasses.dataclass(frozen=True)
class FibonacciDelayStrategy(DelayStrategy):
    """Delay follows the Fibonacci sequence: ``duration * fib(attempt + 1)``.

    ``fib(1) == fib(2) == 1``, so the multipliers run 1, 1, 2, 3, 5, 8, …
    """

    duration: IntervalLike

    def delay(self, attempt: int) -> int | None:
        _check_attempt(attempt)
        nanos = to_nanoseconds(self.duration) or 0
        if nanos == 0:
            return 0
        return min(nanos * _fibonacci(attempt + 1), MAX_NANOSECONDS)


def _fibonacci(n: int) -> int:
    # Iterative; stops growing once the value alone exceeds the nanosecond range.
    previous, current = 1, 1
    for _ in range(2, n):
        previous, current = current, previous + current
        if current > MAX_NANOSECONDS:
            break
    return current


@dataclasses.dataclass(frozen=True)
class ExponentialDelayStrategy(DelayStrategy):
    """Exponential growth with symmetric jitter and an optional cap.

    ``raw = duration * multiplier ** attempt``.  When ``raw`` reaches
    ``max_interval`` the cap is returned as-is, without drawing randomness.
    Otherwise the delay is drawn uniformly from
    ``[raw * (1 - jitter_factor), min(raw * (1 + jitter_factor), max_interval)]``.

    Attributes:
        duration: Base delay for attempt 0.
        multiplier: Growth factor per attempt (default: 2.0).
        jitter_factor: Fraction of ``raw`` used as jitter, in ``[0, 1]``
            (default: 0.1).
        max_interval: Upper bound for any delay; ``None`` leaves the delay
            bounded only by the nanosecond range (default: 60s).
    """

    duration: IntervalLike
    multiplier: float = DEFAULT_MULTIPLIER
    jitter_factor: float = DEFAULT_JITTER_FACTOR
    max_interval: IntervalLike | None = DEFAULT_MAX_INTERVAL

    def __post_init__(self) -> None:
        if not 0.0 <= self.jitter_factor <= 1.0:
            raise ValueError(f"jitter_factor must be within [0, 1], got {self.jitter_factor}")
        if not self.multiplier > 0:
            raise ValueError(f"multiplier must be positive, got {self.multiplier}")

    @property
    def cap(self) -> int:
        if self.max_interval is None:
            return MAX_NANOSECONDS
        capped = to_nanoseconds(self.max_interval)
        return MAX_NANOSECONDS if capped is None else capped

    def delay(self, attempt: int) -> int | None:
        _check_attempt(attempt)
        base = to_nanoseconds(self.duration)
        if base is None:
            return 0
        if base == 0:
            return 0
        cap = self.cap
        try:
            raw = float(base) * float(self.multiplier) ** attempt
        except OverflowError:
            return cap
        if raw >= cap:
            return cap
        spread = raw * self.jitter_factor
        if spread == 0:
            return saturate(raw)
        low = max(0.0, raw - spread)
        high = min(raw + spread, float(cap))
        return min(saturate(random.uniform(low, high)), cap)


@dataclasses.dataclass(frozen=True)
class FunctionDelayStrategy(DelayStrategy):
    """Wrap a caller-supplied ``attempt -> nanoseconds | None`` function.

    The function is treated as opaque: no monotonicity is assumed.  Results
    are clamped into ``[0, MAX_NANOSECONDS]``; NaN becomes 0.
    """

    func: Callable[[int], float | None]

    def delay(self, attempt: int) -> int | None:
        value = self.func(attempt)
        if value is None:
            return None
        if isinstance(value, float):
            return saturate(value)
        return max(0, min(int(value), MAX_NANOSECONDS))


@dataclasses.dataclass(frozen=True)
class ChainEntry:
    """One ``(retries, strategy)`` segment of a :class:`ChainDelayStrategy`."""

    retries: int
    strategy: DelayStrategy

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError(f"retries must be >= 0, got {self.retries}")


@dataclasses.dataclass(frozen=True)
class ChainDelayStrategy(DelayStrategy):
    """Run strategies back to back.

    Each segment sees a local attempt index that restarts at 0, so a
    segment's delays match the same strategy used on its own.  Past the last
    segment the chain returns ``None``.
    """

    entries: tuple[ChainEntry, ...]
    total_retries: int = dataclasses.field(init=False)

    def __init__(self, entries: Sequence[ChainEntry]) -> None:
        object.__setattr__(self, "entries", tuple(entries))
        object.__setattr__(self, "total_retries", sum(e.retries for e in self.entries))

    def delay(self, attempt: int) -> int | None:
        _check_attempt(attempt)
        offset = 0
        for entry in self.entries:
            if attempt < offset + entry.retries:
                return entry.strategy.delay(attempt - offset)
            offset += entry.retries
        return None


__all__ = [
    "DEFAULT_JITTER_FACTOR",
    "DEFAULT_MAX_INTERVAL",
    "DEFAULT_MULTIPLIER",
    "ChainDelayStrategy",
    "ChainEntry",
    "ConstantDelayStrategy",
    "DelayStrategy",
    "ExponentialDelayStrategy",
    "FibonacciDelayStrategy",
    "FunctionDelayStrategy",
    "LinearDelayStrategy",
]
