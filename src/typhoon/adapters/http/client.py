"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

from typhoon.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'typhoon-retry[httpx]' to use the HTTPX adapter") from exc


@contextlib.contextmanager
def mapped_errors(method: str, url: str) -> Iterator[None]:
    """Translate httpx failures raised inside the block into kernel errors."""
    httpx = _require_httpx()
    try:
        yield
    except httpx.TimeoutException as exc:
        raise AppTimeoutError(f"HTTP request timed out: {method} {url}") from exc
    except httpx.HTTPStatusError as exc:
        raise ExternalServiceError(
            service=url,
            message=f"HTTP {exc.response.status_code} from {method} {url}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise ExternalServiceError(service=url, message=str(exc)) from exc


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        httpx = _require_httpx()
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def request(self, method: str, url: str, **kwargs: Any) -> Any:
        return await self._request(method, url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        with mapped_errors(method, url):
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient", "mapped_errors"]
