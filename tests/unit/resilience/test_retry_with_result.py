"""Unit tests for RetryPolicyService.retry_with_result and AttemptLog."""

from __future__ import annotations

import asyncio

import pytest

from typhoon.kernel.errors import RetryLimitExceededError
from typhoon.resilience.retry import RetryPolicyService, RetryPolicyStrategy, RetryResult, TimeInterval
from typhoon.resilience.retry.result import AttemptLog
from typhoon.testing import FakeClock, RecordingSleep


class Flaky(Exception):
    pass


def _service(retries: int = 3) -> RetryPolicyService:
    clock = FakeClock()
    return RetryPolicyService(
        RetryPolicyStrategy.constant(retry=retries, duration=TimeInterval.seconds(1)),
        clock=clock,
        sleep=RecordingSleep(clock),
    )


# ---------------------------------------------------------------------------
# retry_with_result
# ---------------------------------------------------------------------------


class TestRetryWithResult:
    def test_aggregates_attempts_and_errors(self) -> None:
        failures = [Flaky("one"), Flaky("two")]

        async def op() -> str:
            if failures:
                raise failures.pop(0)
            return "done"

        result = asyncio.run(_service().retry_with_result(op))

        assert isinstance(result, RetryResult)
        assert result.value == "done"
        assert result.attempts == 3
        assert [str(e) for e in result.errors] == ["one", "two"]
        assert result.total_duration == pytest.approx(2.0)

    def test_first_try(self) -> None:
        result = asyncio.run(_service().retry_with_result(lambda: 5))
        assert result.value == 5
        assert result.attempts == 1
        assert result.errors == ()
        assert result.total_duration == 0.0

    def test_observer_still_called(self) -> None:
        seen: list[str] = []
        failures = [Flaky("a")]

        async def op() -> str:
            if failures:
                raise failures.pop()
            return "ok"

        result = asyncio.run(_service().retry_with_result(op, on_failure=lambda e: seen.append(str(e))))
        assert seen == ["a"]
        assert result.attempts == 2

    def test_observer_abort_propagates_original(self) -> None:
        async def op() -> None:
            raise Flaky("fatal")

        with pytest.raises(Flaky, match="fatal"):
            asyncio.run(_service().retry_with_result(op, on_failure=lambda _: False))

    def test_exhaustion_raises(self) -> None:
        async def op() -> None:
            raise Flaky("always")

        with pytest.raises(RetryLimitExceededError) as exc_info:
            asyncio.run(_service(retries=1).retry_with_result(op))
        assert exc_info.value.attempts == 2

    def test_calls_are_independent(self) -> None:
        service = _service()
        calls = [0]

        async def op() -> int:
            calls[0] += 1
            if calls[0] % 2:
                raise Flaky("odd")
            return calls[0]

        async def run() -> list[RetryResult[int]]:
            return [await service.retry_with_result(op), await service.retry_with_result(op)]

        first, second = asyncio.run(run())
        assert (first.attempts, len(first.errors)) == (2, 1)
        assert (second.attempts, len(second.errors)) == (2, 1)

    def test_concurrent_calls(self) -> None:
        service = _service()

        async def make(n: int):
            remaining = [n]

            async def op() -> int:
                if remaining[0]:
                    remaining[0] -= 1
                    raise Flaky(str(n))
                return n

            return await service.retry_with_result(op)

        async def run():
            return await asyncio.gather(make(0), make(1), make(2))

        results = asyncio.run(run())
        assert [r.attempts for r in results] == [1, 2, 3]
        assert [len(r.errors) for r in results] == [0, 1, 2]


# ---------------------------------------------------------------------------
# AttemptLog
# ---------------------------------------------------------------------------


class TestAttemptLog:
    def test_build(self) -> None:
        async def run() -> RetryResult[str]:
            log = AttemptLog()
            await log.record_attempt()
            await log.record_error(Flaky("x"))
            await log.record_attempt()
            return await log.build("v", 0.5)

        result = asyncio.run(run())
        assert result.attempts == 2
        assert len(result.errors) == 1
        assert result.total_duration == 0.5

    def test_negative_duration_clamped(self) -> None:
        async def run() -> RetryResult[None]:
            return await AttemptLog().build(None, -1.0)

        assert asyncio.run(run()).total_duration == 0.0

    def test_result_is_frozen(self) -> None:
        result = RetryResult(value=1, attempts=1, total_duration=0.0)
        with pytest.raises(AttributeError):
            result.attempts = 2  # type: ignore[misc]
