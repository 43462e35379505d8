"""Resilience – retry policies, delay strategies and deadlines."""

from typhoon.resilience.retry import (
    CancellationToken,
    RetryExecutor,
    RetryPolicyService,
    RetryPolicyStrategy,
    RetryResult,
    RetrySettings,
    TimeInterval,
)
from typhoon.resilience.timeouts import Deadline

__all__ = [
    "CancellationToken",
    "Deadline",
    "RetryExecutor",
    "RetryPolicyService",
    "RetryPolicyStrategy",
    "RetryResult",
    "RetrySettings",
    "TimeInterval",
]
