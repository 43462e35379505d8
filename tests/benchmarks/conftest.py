"""conftest.py for benchmarks.

The ``event_loop`` fixture is session-scoped so every benchmark shares one
asyncio event loop and loop start-up cost stays out of the timings.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Run a coroutine to completion on the shared session loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(service.retry(op)))
    """

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
