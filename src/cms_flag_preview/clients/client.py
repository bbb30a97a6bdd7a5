"""Base client for network requests."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from .exceptions import (
    APIError,
    AuthError,
    ContentTypeError,
    DecodeError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)


class Client(ABC):
    """Base class for network clients.

    Provides lazy-initialized httpx.Client with context manager support,
    configurable timeout and headers via dict config. Requests are
    single-shot: transport failures surface as TransportError.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 10)
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
        return float(self._config.get("timeout", 10))

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
        """Map HTTP errors to exceptions.

        Args:
            response: The HTTP response to check

        Returns:
            The response if successful

        Raises:
            AuthError: For 401 and 403 responses
            NotFoundError: For 404 responses
            ContentTypeError: For 422 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        raw_body = response.text

        if status_code in (401, 403):
            raise AuthError(
                f"Authentication failed ({status_code}): {response.url}",
                status_code=status_code,
                raw_body=raw_body,
            )
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}", raw_body=raw_body)
        elif status_code == 422:
            raise ContentTypeError(
                f"Invalid content type: {response.url}", raw_body=raw_body
            )
        else:
            raise APIError(
                f"API error {status_code}: {response.url}",
                status_code=status_code,
                raw_body=raw_body,
            )

    def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> httpx.Response:
        """Make a single request and map failures to exceptions.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (appended to base_url)
            **kwargs: Additional arguments passed to httpx.request

        Returns:
            The HTTP response

        Raises:
            TransportError: If the request fails due to network issues
            APIError: If the API returns a non-2xx response
        """
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout after {self.timeout:g}s: {path}")
            raise TransportError(f"Request timed out: {path}") from e
        except httpx.TransportError as e:
            logger.warning(f"Connection error: {e}")
            raise TransportError(f"Connection failed: {e}") from e

        return self._handle_response(response)

    def get(self, path: str, **kwargs) -> httpx.Response:
        """Convenience method for GET requests.

        Args:
            path: URL path (appended to base_url)
            **kwargs: Additional arguments passed to httpx.request

        Returns:
            The HTTP response
        """
        return self._request("GET", path, **kwargs)

    def get_json(self, path: str, **kwargs) -> dict[str, Any]:
        """GET a path and decode the JSON object in the response body.

        Raises:
            DecodeError: If the body is not a JSON object
        """
        response = self.get(path, **kwargs)
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Malformed JSON in response from {response.url}",
                raw_body=response.text,
            ) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object from {response.url}",
                raw_body=response.text,
            )
        return data

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch data from the API. Must be implemented by subclasses."""
        pass
