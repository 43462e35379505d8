"""Resilience – RetryPolicyService, the retry execution loop.

Each call runs one sequential loop::

    deadline passed?  -> DeadlineExceededError
    invoke operation  -> success: return the value
    on_failure(error) -> False: re-raise the original error
    next delay        -> none left: RetryLimitExceededError
    cancelled?        -> asyncio.CancelledError
    sleep(delay), repeat

Attempt ``k + 1`` never starts before attempt ``k`` has failed, been
observed, and its delay has elapsed.
"""
from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from typhoon.kernel.errors import DeadlineExceededError, RetryLimitExceededError
from typhoon.kernel.time import Clock, SystemClock
from typhoon.resilience.retry.duration import NANOSECONDS_PER_SECOND, IntervalLike, to_seconds
from typhoon.resilience.retry.result import AttemptLog, RetryResult
from typhoon.resilience.retry.sequence import RetrySequence
from typhoon.resilience.retry.strategy import RetryPolicyStrategy
from typhoon.resilience.timeouts import Deadline

if TYPE_CHECKING:
    from typhoon.resilience.retry.settings import RetrySettings

T = TypeVar("T")
logger = logging.getLogger(__name__)

OnFailure = Callable[[Exception], Any]
Sleep = Callable[[float], Awaitable[Any]]


class CancellationToken:
    """Cooperative cancellation flag, checked by the loop before every sleep."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


async def maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _checkpoint(cancellation: CancellationToken | None) -> None:
    task = asyncio.current_task()
    if (cancellation is not None and cancellation.cancelled) or (task is not None and task.cancelling()):
        logger.info("retry.cancelled")
        raise asyncio.CancelledError


class RetryPolicyService:
    """Retry an operation according to a :class:`RetryPolicyStrategy`.

    Args:
        strategy: Default strategy, used unless a call overrides it.
        max_total_duration: Optional budget for a whole retry lifecycle.
            Checked before every attempt; an in-flight attempt is never
            interrupted.
        clock: Monotonic clock for the deadline and elapsed-time measurement.
        sleep: Awaitable sleep taking seconds (default: ``asyncio.sleep``).

    Example::

        service = RetryPolicyService(
            RetryPolicyStrategy.exponential(retry=5, duration=TimeInterval.milliseconds(200)),
            max_total_duration=TimeInterval.seconds(10),
        )
        body = await service.retry(lambda: fetch("/health"))
    """

    def __init__(
        self,
        strategy: RetryPolicyStrategy,
        max_total_duration: IntervalLike | None = None,
        *,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self._strategy = strategy
        self._max_total_seconds = None if max_total_duration is None else to_seconds(max_total_duration)
        self._clock = clock or SystemClock()
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, settings: RetrySettings, **kwargs: Any) -> RetryPolicyService:
        """Build a service from environment-driven :class:`RetrySettings`."""
        return cls(settings.to_strategy(), settings.max_total_duration, **kwargs)

    @property
    def strategy(self) -> RetryPolicyStrategy:
        return self._strategy

    @property
    def max_total_seconds(self) -> float | None:
        return self._max_total_seconds

    async def retry(
        self,
        operation: Callable[[], Awaitable[T] | T],
        *,
        strategy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
        cancellation: CancellationToken | None = None,
    ) -> T:
        """Run *operation* until it succeeds or the policy gives up.

        Args:
            operation: Zero-argument callable, re-invoked on every attempt.
                May return an awaitable or a plain value.
            strategy: Overrides the default strategy for this call only.
            on_failure: Called with each operational error before the next
                delay is computed.  Returning ``False`` stops retrying and
                re-raises that error unchanged; ``None`` or ``True`` continues.
            cancellation: Optional token checked before every sleep.

        Raises:
            RetryLimitExceededError: the attempt budget ran out.
            DeadlineExceededError: ``max_total_duration`` elapsed.
            asyncio.CancelledError: the task or *cancellation* was cancelled.
        """
        started = self._clock.monotonic()
        deadline = None
        if self._max_total_seconds is not None:
            deadline = Deadline(expires_at=started + self._max_total_seconds, clock=self._clock)
        delays = iter(RetrySequence(strategy or self._strategy))
        attempts = 0
        last_error: Exception | None = None

        while True:
            if deadline is not None and deadline.is_expired:
                elapsed = self._clock.monotonic() - started
                logger.warning("retry.deadline_exceeded attempts=%d elapsed=%.3fs", attempts, elapsed)
                raise DeadlineExceededError(attempts=attempts, elapsed_seconds=elapsed, cause=last_error)

            attempts += 1
            try:
                return await maybe_await(operation())
            except Exception as exc:
                last_error = exc
                logger.debug("retry.attempt_failed attempt=%d exc=%r", attempts, exc)
                if on_failure is not None and (await maybe_await(on_failure(exc))) is False:
                    logger.info("retry.aborted_by_observer attempt=%d", attempts)
                    raise

            delay = next(delays, None)
            if delay is None:
                logger.warning("retry.limit_exceeded attempts=%d", attempts)
                raise RetryLimitExceededError(attempts=attempts, cause=last_error)

            _checkpoint(cancellation)
            logger.debug("retry.scheduled attempt=%d delay=%dns", attempts, delay)
            await self._sleep(delay / NANOSECONDS_PER_SECOND)

    async def retry_with_result(
        self,
        operation: Callable[[], Awaitable[T] | T],
        *,
        strategy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
        cancellation: CancellationToken | None = None,
    ) -> RetryResult[T]:
        """Like :meth:`retry`, but also report attempts, elapsed time and errors."""
        log = AttemptLog()

        async def attempt() -> T:
            await log.record_attempt()
            return await maybe_await(operation())

        async def observe(error: Exception) -> bool | None:
            await log.record_error(error)
            if on_failure is None:
                return True
            return await maybe_await(on_failure(error))

        started = self._clock.monotonic()
        value = await self.retry(attempt, strategy=strategy, on_failure=observe, cancellation=cancellation)
        return await log.build(value, self._clock.monotonic() - started)


class RetryExecutor:
    """Decorator-friendly wrapper around ``RetryPolicyService``.

    Every call of the decorated coroutine function runs through
    :meth:`RetryPolicyService.retry` with the bound arguments.
    """

    def __init__(
        self,
        service: RetryPolicyService,
        *,
        strategy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
    ) -> None:
        self._service = service
        self._strategy = strategy
        self._on_failure = on_failure

    def __call__(self, func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await self._service.retry(
                lambda: func(*args, **kwargs),
                strategy=self._strategy,
                on_failure=self._on_failure,
            )

        return wrapper


__all__ = ["CancellationToken", "RetryExecutor", "RetryPolicyService"]
