"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── RetryPolicyError            (policy.py)
    │   ├── RetryLimitExceededError
    │   └── DeadlineExceededError
    └── InfrastructureError         (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError

Configuration errors live in :mod:`typhoon.config.validation`.
"""

from typhoon.kernel.errors.base import BaseError
from typhoon.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)
from typhoon.kernel.errors.policy import (
    DeadlineExceededError,
    RetryLimitExceededError,
    RetryPolicyError,
)

__all__ = [
    "BaseError",
    "DeadlineExceededError",
    "ExternalServiceError",
    "InfrastructureError",
    "RetryLimitExceededError",
    "RetryPolicyError",
    "TimeoutError",
]
