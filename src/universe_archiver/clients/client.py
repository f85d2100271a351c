"""Base client for catalog HTTP requests."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


class Client(ABC):
    """Base class for catalog clients.

    Wraps a lazily created httpx.Client with context manager support and
    bounded retries with exponential backoff for transient failures.

    Config keys:
        base_url (required): Base URL for relative request paths
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Total attempts per request (default: 3)
        retry_delay: Delay before the first retry in seconds, doubled after
            every further failure (default: 1)
        headers: Additional headers to include in requests
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", 3)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP error statuses to exceptions.

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        url = str(response.url)

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {url}", url=url)
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {url}", url=url)
        else:
            raise APIError(f"API error {status_code}: {url}", status_code=status_code, url=url)

    def _backoff(self, attempt: int) -> float:
        return self.retry_delay * (2**attempt)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Make a request, retrying transient failures.

        Transport errors (connect, read, write, protocol and timeouts), 429 and
        5xx responses are retried up to ``retry_attempts`` times. Other error
        statuses and non-transport httpx errors are raised at once.

        Args:
            method: HTTP method
            path: URL path relative to base_url, or an absolute URL
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            The successful HTTP response

        Raises:
            ConnectionError: If every attempt failed at the network level
            APIError: If the service answered with a non-2xx status
            ClientError: For other httpx failures such as too many redirects
        """
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                response = self.client.request(method, path, **kwargs)
                return self._handle_response(response)
            except httpx.TransportError as e:
                last_exception = e
                logger.warning(
                    f"{type(e).__name__} for {path} "
                    f"(attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
            except APIError as e:
                if not e.is_transient or attempt == self.retry_attempts - 1:
                    raise
                last_exception = e
                logger.warning(
                    f"HTTP {e.status_code} for {path} "
                    f"(attempt {attempt + 1}/{self.retry_attempts})"
                )
            except httpx.HTTPError as e:
                raise ClientError(
                    f"{type(e).__name__} for {path}: {e}", url=path
                ) from e

            if attempt < self.retry_attempts - 1:
                sleep(self._backoff(attempt))

        msg = f"Connection failed after {self.retry_attempts} attempts: {path}"
        raise ConnectionError(msg, url=path) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        """Convenience method for GET requests."""
        return self._request("GET", path, **kwargs)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch a document from the API. Must be implemented by subclasses."""
        pass
