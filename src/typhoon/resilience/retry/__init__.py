"""Resilience – retry with composable delay strategies, deadlines and result aggregation."""
from typhoon.resilience.retry.duration import MAX_NANOSECONDS, TimeInterval, TimeUnit, to_nanoseconds
from typhoon.resilience.retry.result import RetryResult
from typhoon.resilience.retry.sequence import RetryIterator, RetrySequence
from typhoon.resilience.retry.service import CancellationToken, RetryExecutor, RetryPolicyService
from typhoon.resilience.retry.settings import RetrySettings
from typhoon.resilience.retry.strategies import (
    ChainDelayStrategy,
    ChainEntry,
    ConstantDelayStrategy,
    DelayStrategy,
    ExponentialDelayStrategy,
    FibonacciDelayStrategy,
    FunctionDelayStrategy,
    LinearDelayStrategy,
)
from typhoon.resilience.retry.strategy import RetryPolicyStrategy, StrategyKind

__all__ = [
    "MAX_NANOSECONDS", "CancellationToken", "ChainDelayStrategy", "ChainEntry",
    "ConstantDelayStrategy", "DelayStrategy", "ExponentialDelayStrategy",
    "FibonacciDelayStrategy", "FunctionDelayStrategy", "LinearDelayStrategy",
    "RetryExecutor", "RetryIterator", "RetryPolicyService", "RetryPolicyStrategy",
    "RetryResult", "RetrySequence", "RetrySettings", "StrategyKind", "TimeInterval",
    "TimeUnit", "to_nanoseconds",
]
