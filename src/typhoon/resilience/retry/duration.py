"""Resilience – time intervals normalised to integer nanoseconds.

Every delay produced by the retry engine is an ``int`` count of nanoseconds
in ``[0, MAX_NANOSECONDS]``.  Conversions saturate instead of wrapping, and
the :attr:`TimeInterval.NEVER` sentinel converts to ``None``.
"""
from __future__ import annotations

import dataclasses
import enum
import math
from datetime import timedelta
from typing import ClassVar

MAX_NANOSECONDS = 2**64 - 1
NANOSECONDS_PER_SECOND = 1_000_000_000


class TimeUnit(enum.Enum):
    SECONDS = NANOSECONDS_PER_SECOND
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000
    NANOSECONDS = 1
    NEVER = 0


def saturate(value: float) -> int:
    """Clamp a computed delay into the representable nanosecond range."""
    if (isinstance(value, float) and math.isnan(value)) or value <= 0:
        return 0
    if value >= MAX_NANOSECONDS:
        return MAX_NANOSECONDS
    return int(value)


@dataclasses.dataclass(frozen=True)
class TimeInterval:
    """A magnitude in one of the supported units.

    Build instances with the unit constructors::

        TimeInterval.seconds(2)
        TimeInterval.milliseconds(500)
        TimeInterval.NEVER
    """

    value: int | float
    unit: TimeUnit

    NEVER: ClassVar[TimeInterval]

    @classmethod
    def seconds(cls, value: int | float) -> TimeInterval:
        return cls(value, TimeUnit.SECONDS)

    @classmethod
    def milliseconds(cls, value: int | float) -> TimeInterval:
        return cls(value, TimeUnit.MILLISECONDS)

    @classmethod
    def microseconds(cls, value: int | float) -> TimeInterval:
        return cls(value, TimeUnit.MICROSECONDS)

    @classmethod
    def nanoseconds(cls, value: int | float) -> TimeInterval:
        return cls(value, TimeUnit.NANOSECONDS)

    @property
    def is_never(self) -> bool:
        return self.unit is TimeUnit.NEVER

    @property
    def seconds_value(self) -> float | None:
        """The interval in seconds, or ``None`` for :attr:`NEVER`."""
        if self.is_never:
            return None
        return self.value * self.unit.value / NANOSECONDS_PER_SECOND

    @property
    def nanoseconds_value(self) -> int | None:
        """Integer nanoseconds, saturated; ``None`` for :attr:`NEVER`.

        Fractional magnitudes such as ``seconds(0.5)`` are truncated to whole
        nanoseconds.
        """
        if self.is_never:
            return None
        return saturate(self.value * self.unit.value)

    def __str__(self) -> str:
        if self.is_never:
            return "never"
        return f"{self.value}{_SUFFIXES[self.unit]}"


TimeInterval.NEVER = TimeInterval(0, TimeUnit.NEVER)

_SUFFIXES = {
    TimeUnit.SECONDS: "s",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.MICROSECONDS: "us",
    TimeUnit.NANOSECONDS: "ns",
}

IntervalLike = TimeInterval | timedelta | int | float


def to_nanoseconds(interval: IntervalLike) -> int | None:
    """Normalise *interval* to nanoseconds.

    Plain numbers are read as seconds.  ``timedelta`` values are converted
    exactly from their day/second/microsecond components.
    """
    if isinstance(interval, TimeInterval):
        return interval.nanoseconds_value
    if isinstance(interval, timedelta):
        micros = (interval.days * 86_400 + interval.seconds) * 1_000_000 + interval.microseconds
        return max(0, min(micros * 1_000, MAX_NANOSECONDS))
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        raise TypeError(f"Unsupported interval type: {type(interval).__name__}")
    if isinstance(interval, int):
        return max(0, min(interval * NANOSECONDS_PER_SECOND, MAX_NANOSECONDS))
    if math.isinf(interval) and interval > 0:
        return MAX_NANOSECONDS
    return saturate(interval * NANOSECONDS_PER_SECOND)


def to_seconds(interval: IntervalLike) -> float | None:
    """Normalise *interval* to float seconds (``None`` for ``NEVER``)."""
    nanos = to_nanoseconds(interval)
    if nanos is None:
        return None
    return nanos / NANOSECONDS_PER_SECOND


__all__ = [
    "MAX_NANOSECONDS",
    "NANOSECONDS_PER_SECOND",
    "IntervalLike",
    "TimeInterval",
    "TimeUnit",
    "saturate",
    "to_nanoseconds",
    "to_seconds",
]
