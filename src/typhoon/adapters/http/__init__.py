"""HTTP adapter – async httpx client wrappers with retry policies."""
from typhoon.adapters.http.client import HttpClient, HttpxHttpClient
from typhoon.adapters.http.retry_client import RetryingHttpClient, retry_transient_only

__all__ = ["HttpClient", "HttpxHttpClient", "RetryingHttpClient", "retry_transient_only"]
