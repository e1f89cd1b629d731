"""Base client for the publishing service."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ServiceConnectionError,
)

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = {"GET", "PUT"}


class Client(ABC):
    """Base class for HTTP service clients.

    Provides a lazily created httpx.Client with context manager support and
    retries for transient network failures, configured by a dict.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Attempts for connection errors and timeouts (default: 3)
        retry_delay: Delay between attempts in seconds (default: 1)
        headers: Additional headers to include in requests
        api_token: Sent as a bearer token when set
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
        return int(self._config.get("retry_attempts", 3))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        headers = dict(self._config.get("headers", {}))
        token = self._config.get("api_token")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
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
            ConflictError: For 409 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        body = response.text

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}", body=body)
        elif status_code == 409:
            raise ConflictError(f"Conflict: {response.url}", body=body)
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {response.url}", body=body)
        else:
            raise APIError(
                f"API error {status_code}: {response.url}",
                status_code=status_code,
                body=body,
            )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Make a request, retrying connection errors and timeouts.

        Requests that never reached the service are always retried. Other
        timeouts are retried only for idempotent methods, since the service
        may already have processed a POST.

        Raises:
            ServiceConnectionError: If every attempt fails at the network level
            APIError: If the service returns a non-2xx response
        """
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                response = self.client.request(method, path, **kwargs)
                return self._handle_response(response)
            except (httpx.ConnectError, httpx.ConnectTimeout) as e:
                last_exception = e
                logger.warning(
                    f"Connection error (attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
            except httpx.TimeoutException as e:
                if method not in IDEMPOTENT_METHODS:
                    logger.error(f"Timeout on {method} {path}, not retrying: {e}")
                    raise ServiceConnectionError(f"{method} {path} timed out") from e
                last_exception = e
                logger.warning(
                    f"Timeout (attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
            if attempt < self.retry_attempts - 1:
                sleep(self.retry_delay)

        msg = f"Connection failed after {self.retry_attempts} attempts"
        raise ServiceConnectionError(msg) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self._request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> httpx.Response:
        return self._request("PUT", path, **kwargs)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch a record from the service. Must be implemented by subclasses."""
        pass
