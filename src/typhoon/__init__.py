"""
typhoon – policy-driven retries for asynchronous operations.

Import path convention::

    from typhoon.resilience.retry import RetryPolicyService, RetryPolicyStrategy
    from typhoon.resilience.retry.duration import TimeInterval
    from typhoon.kernel.errors import RetryLimitExceededError
    from typhoon.adapters.http import RetryingHttpClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
