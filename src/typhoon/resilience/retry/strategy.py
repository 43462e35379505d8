"""Resilience – RetryPolicyStrategy, the closed set of retry strategies.

A strategy pairs an attempt budget (``retries``) with a delay strategy::

    RetryPolicyStrategy.constant(retry=3, duration=TimeInterval.milliseconds(100))
    RetryPolicyStrategy.exponential(retry=5, duration=TimeInterval.seconds(1), jitter_factor=0.2)
    RetryPolicyStrategy.chain(
        RetryPolicyStrategy.constant(retry=2, duration=TimeInterval.milliseconds(50)),
        RetryPolicyStrategy.exponential(retry=4, duration=TimeInterval.seconds(1)),
    )
"""
from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable

from typhoon.resilience.retry.duration import IntervalLike
from typhoon.resilience.retry.strategies import (
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MULTIPLIER,
    ChainDelayStrategy,
    ChainEntry,
    ConstantDelayStrategy,
    DelayStrategy,
    ExponentialDelayStrategy,
    FibonacciDelayStrategy,
    FunctionDelayStrategy,
    LinearDelayStrategy,
)


class StrategyKind(str, enum.Enum):
    CONSTANT = "constant"
    LINEAR = "linear"
    FIBONACCI = "fibonacci"
    EXPONENTIAL = "exponential"
    CUSTOM = "custom"
    CHAIN = "chain"


@dataclasses.dataclass(frozen=True)
class RetryPolicyStrategy:
    """Attempt budget plus the delay strategy applied between attempts.

    Use the classmethod constructors rather than instantiating directly.

    Attributes:
        kind: Which variant this strategy is.
        retries: Maximum number of retries (the first attempt is not counted).
        delay_strategy: Computes the wait before each retry.
        duration: Base interval for the built-in variants, ``None`` for
            ``custom`` and ``chain``.
    """

    kind: StrategyKind
    retries: int
    delay_strategy: DelayStrategy
    duration: IntervalLike | None = None

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError(f"retry must be >= 0, got {self.retries}")

    @classmethod
    def constant(cls, retry: int, duration: IntervalLike) -> RetryPolicyStrategy:
        return cls(StrategyKind.CONSTANT, retry, ConstantDelayStrategy(duration), duration)

    @classmethod
    def linear(cls, retry: int, duration: IntervalLike) -> RetryPolicyStrategy:
        return cls(StrategyKind.LINEAR, retry, LinearDelayStrategy(duration), duration)

    @classmethod
    def fibonacci(cls, retry: int, duration: IntervalLike) -> RetryPolicyStrategy:
        return cls(StrategyKind.FIBONACCI, retry, FibonacciDelayStrategy(duration), duration)

    @classmethod
    def exponential(
        cls,
        retry: int,
        duration: IntervalLike,
        *,
        jitter_factor: float = DEFAULT_JITTER_FACTOR,
        max_interval: IntervalLike | None = DEFAULT_MAX_INTERVAL,
        multiplier: float = DEFAULT_MULTIPLIER,
    ) -> RetryPolicyStrategy:
        delay = ExponentialDelayStrategy(
            duration,
            multiplier=multiplier,
            jitter_factor=jitter_factor,
            max_interval=max_interval,
        )
        return cls(StrategyKind.EXPONENTIAL, retry, delay, duration)

    @classmethod
    def custom(
        cls,
        retry: int,
        strategy: DelayStrategy | Callable[[int], float | None],
    ) -> RetryPolicyStrategy:
        """Use a caller-supplied delay strategy or ``attempt -> nanoseconds`` function."""
        if not isinstance(strategy, DelayStrategy):
            strategy = FunctionDelayStrategy(strategy)
        return cls(StrategyKind.CUSTOM, retry, strategy)

    @classmethod
    def chain(cls, *segments: ChainEntry | RetryPolicyStrategy) -> RetryPolicyStrategy:
        """Compose segments in order; the budget is the sum of segment budgets."""
        entries = [
            ChainEntry(s.retries, s.delay_strategy) if isinstance(s, RetryPolicyStrategy) else s
            for s in segments
        ]
        delay = ChainDelayStrategy(entries)
        return cls(StrategyKind.CHAIN, delay.total_retries, delay)


__all__ = ["RetryPolicyStrategy", "StrategyKind"]
