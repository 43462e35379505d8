"""Resilience – RetrySequence and RetryIterator.

``RetrySequence`` turns a :class:`RetryPolicyStrategy` into a lazy, finite
series of delays (nanoseconds).  Each ``iter()`` call starts a new
:class:`RetryIterator`; an iterator itself is single-pass and cannot be
rewound.
"""
from __future__ import annotations

from collections.abc import Iterator

from typhoon.resilience.retry.strategies import DelayStrategy
from typhoon.resilience.retry.strategy import RetryPolicyStrategy


class RetryIterator(Iterator[int]):
    """Yield at most ``max_retries`` delays from *delay_strategy*.

    Every ``next()`` consumes one slot, including one where the strategy
    returns ``None``; that ``None`` ends iteration just like an exhausted
    budget.  Not safe for concurrent use.
    """

    def __init__(self, max_retries: int, delay_strategy: DelayStrategy) -> None:
        self._max_retries = max_retries
        self._delay_strategy = delay_strategy
        self._retries = 0
        self._finished = False

    @property
    def attempts_taken(self) -> int:
        return self._retries

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def __next__(self) -> int:
        if self._finished or self._retries >= self._max_retries:
            self._finished = True
            raise StopIteration
        delay = self._delay_strategy.delay(self._retries)
        self._retries += 1
        if delay is None:
            self._finished = True
            raise StopIteration
        return delay


class RetrySequence:
    """Iterable of retry delays for one strategy."""

    def __init__(self, strategy: RetryPolicyStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> RetryPolicyStrategy:
        return self._strategy

    def __iter__(self) -> RetryIterator:
        return RetryIterator(self._strategy.retries, self._strategy.delay_strategy)


__all__ = ["RetryIterator", "RetrySequence"]
