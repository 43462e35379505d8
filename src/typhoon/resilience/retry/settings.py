"""Resilience – RetrySettings, environment-driven retry configuration.

Example environment::

    TYPHOON_RETRY_KIND=exponential
    TYPHOON_RETRY_RETRIES=5
    TYPHOON_RETRY_DURATION_MS=200
    TYPHOON_RETRY_MAX_INTERVAL_MS=10000
    TYPHOON_RETRY_MAX_TOTAL_DURATION_S=30
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from typhoon.config.settings import Settings
from typhoon.config.validation import InvalidSettingValueError
from typhoon.resilience.retry.duration import TimeInterval
from typhoon.resilience.retry.strategies import DEFAULT_JITTER_FACTOR, DEFAULT_MULTIPLIER
from typhoon.resilience.retry.strategy import RetryPolicyStrategy, StrategyKind

_CONFIGURABLE_KINDS = frozenset({
    StrategyKind.CONSTANT,
    StrategyKind.LINEAR,
    StrategyKind.FIBONACCI,
    StrategyKind.EXPONENTIAL,
})


@dataclasses.dataclass
class RetrySettings(Settings):
    """Settings for one :class:`~typhoon.resilience.retry.RetryPolicyService`.

    ``max_interval_ms == 0`` leaves exponential delays uncapped and
    ``max_total_duration_s == 0`` disables the total time budget.
    """

    _prefix: ClassVar[str] = "TYPHOON_RETRY"

    kind: str = StrategyKind.EXPONENTIAL.value
    retries: int = 3
    duration_ms: int = 100
    multiplier: float = DEFAULT_MULTIPLIER
    jitter_factor: float = DEFAULT_JITTER_FACTOR
    max_interval_ms: int = 60_000
    max_total_duration_s: float = 0.0

    def _validate(self) -> None:
        if self.kind not in {k.value for k in _CONFIGURABLE_KINDS}:
            allowed = ", ".join(sorted(k.value for k in _CONFIGURABLE_KINDS))
            raise InvalidSettingValueError("kind", self.kind, f"expected one of: {allowed}")
        if self.retries < 0:
            raise InvalidSettingValueError("retries", self.retries, "must be >= 0")
        if self.duration_ms < 0:
            raise InvalidSettingValueError("duration_ms", self.duration_ms, "must be >= 0")
        if not self.multiplier > 0:
            raise InvalidSettingValueError("multiplier", self.multiplier, "must be positive")
        if not 0.0 <= self.jitter_factor <= 1.0:
            raise InvalidSettingValueError("jitter_factor", self.jitter_factor, "must be within [0, 1]")
        if self.max_interval_ms < 0:
            raise InvalidSettingValueError("max_interval_ms", self.max_interval_ms, "must be >= 0")
        if self.max_total_duration_s < 0:
            raise InvalidSettingValueError("max_total_duration_s", self.max_total_duration_s, "must be >= 0")

    @property
    def max_total_duration(self) -> float | None:
        return self.max_total_duration_s or None

    def to_strategy(self) -> RetryPolicyStrategy:
        duration = TimeInterval.milliseconds(self.duration_ms)
        kind = StrategyKind(self.kind)
        if kind is StrategyKind.CONSTANT:
            return RetryPolicyStrategy.constant(self.retries, duration)
        if kind is StrategyKind.LINEAR:
            return RetryPolicyStrategy.linear(self.retries, duration)
        if kind is StrategyKind.FIBONACCI:
            return RetryPolicyStrategy.fibonacci(self.retries, duration)
        return RetryPolicyStrategy.exponential(
            self.retries,
            duration,
            jitter_factor=self.jitter_factor,
            max_interval=TimeInterval.milliseconds(self.max_interval_ms) if self.max_interval_ms else None,
            multiplier=self.multiplier,
        )


__all__ = ["RetrySettings"]
