"""HTTP adapter – RetryingHttpClient.

Every attempt re-sends the complete request; partial steps (connecting,
reading the body) are never retried on their own.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from typhoon.adapters.http.client import HttpxHttpClient, mapped_errors
from typhoon.kernel.errors import ExternalServiceError
from typhoon.observability.logging import get_logger
from typhoon.resilience.retry import RetryPolicyService, RetryPolicyStrategy
from typhoon.resilience.retry.duration import IntervalLike
from typhoon.resilience.retry.service import OnFailure, maybe_await

logger = get_logger(__name__)

_RETRYABLE_CLIENT_STATUSES = frozenset({408, 425, 429})


def retry_transient_only(error: Exception) -> bool:
    """Observer that stops retrying on 4xx responses other than 408/425/429."""
    if isinstance(error, ExternalServiceError) and error.status_code is not None:
        status = error.status_code
        return not (400 <= status < 500) or status in _RETRYABLE_CLIENT_STATUSES
    return True


class RetryingHttpClient(HttpxHttpClient):
    """HTTP client that retries whole requests according to a strategy.

    Args:
        strategy: Default retry strategy for every request.
        base_url: Forwarded to :class:`httpx.AsyncClient`.
        timeout: Per-request timeout in seconds.
        on_failure: Default observer, same contract as
            :meth:`RetryPolicyService.retry`.
        max_total_duration: Optional time budget per request, across retries.
    """

    def __init__(
        self,
        strategy: RetryPolicyStrategy,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        on_failure: OnFailure | None = None,
        max_total_duration: IntervalLike | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self._service = RetryPolicyService(strategy, max_total_duration)
        self._on_failure = on_failure

    @property
    def service(self) -> RetryPolicyService:
        return self._service

    def _observer(self, method: str, url: str, on_failure: OnFailure | None) -> OnFailure:
        observer = on_failure or self._on_failure

        async def observe(error: Exception) -> bool | None:
            logger.warning("http.attempt_failed", method=method, url=url, error=error)
            if observer is None:
                return True
            return await maybe_await(observer(error))

        return observe

    async def request(
        self,
        method: str,
        url: str,
        *,
        retry_policy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
        **kwargs: Any,
    ) -> Any:
        return await self._service.retry(
            lambda: self._request(method, url, **kwargs),
            strategy=retry_policy,
            on_failure=self._observer(method, url, on_failure),
        )

    async def upload(
        self,
        url: str,
        content: bytes,
        *,
        method: str = "POST",
        retry_policy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
        **kwargs: Any,
    ) -> Any:
        """Send *content* as the request body, re-sending it on every attempt."""
        return await self.request(
            method, url, content=content, retry_policy=retry_policy, on_failure=on_failure, **kwargs
        )

    async def download(
        self,
        url: str,
        destination: str | Path,
        *,
        retry_policy: RetryPolicyStrategy | None = None,
        on_failure: OnFailure | None = None,
        chunk_size: int = 64 * 1024,
        **kwargs: Any,
    ) -> Path:
        """Stream the body of ``GET url`` into *destination*.

        Each attempt truncates the file and starts over.  If the download
        finally fails, a partially written file is removed.
        """
        path = Path(destination)
        opened = False

        async def attempt() -> Path:
            nonlocal opened
            with mapped_errors("GET", url):
                async with self._client.stream("GET", url, **kwargs) as response:
                    response.raise_for_status()
                    opened = True
                    with path.open("wb") as fh:
                        async for chunk in response.aiter_bytes(chunk_size):
                            fh.write(chunk)
            return path

        try:
            return await self._service.retry(
                attempt,
                strategy=retry_policy,
                on_failure=self._observer("GET", url, on_failure),
            )
        except BaseException:
            if opened:
                path.unlink(missing_ok=True)
            raise


__all__ = ["RetryingHttpClient", "retry_transient_only"]
