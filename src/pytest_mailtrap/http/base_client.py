"""Base HTTP client for pytest-mailtrap."""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from ..constants import API_TOKEN_HEADER
from ..errors import (
    ApiError,
    AuthenticationError,
    DecodeError,
    InboxNotFoundError,
    NetworkError,
)
from ..types import ClientConfig

logger = logging.getLogger("pytest_mailtrap")

_T = TypeVar("_T", list, dict)


def encode_path_segment(value: str | int) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode.

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(str(value), safe="")


class BaseApiClient:
    """Base HTTP client for the Mailtrap API.

    Requests are never retried here: a failed call surfaces immediately as
    NetworkError, ApiError or DecodeError.

    Attributes:
        config: Client configuration.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the base API client.

        Args:
            config: Client configuration with API token and settings.
        """
        self.config = config
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.config.base_url,
                headers={
                    API_TOKEN_HEADER: self.config.api_token,
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self.config.timeout / 1000),
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make a single HTTP request.

        Args:
            method: HTTP method (GET, PATCH, ...).
            path: API path, relative to the base URL.
            params: Query parameters.

        Returns:
            The HTTP response.

        Raises:
            NetworkError: If there's a network communication failure.
            AuthenticationError: If the API token is rejected.
            InboxNotFoundError: If the inbox or message does not exist.
            ApiError: For any other non-2xx response.
        """
        client = self._get_client()
        try:
            response = client.request(method, path, params=params)
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)

        if response.status_code >= 400:
            self._handle_error_response(response)

        return response

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        Args:
            response: The HTTP response.

        Raises:
            AuthenticationError: On 401 and 403.
            InboxNotFoundError: On 404.
            ApiError: For other API errors.
        """
        try:
            data = response.json()
            message = data.get("error", data.get("message", response.text))
            if isinstance(message, list):
                message = ", ".join(str(item) for item in message)
            elif not isinstance(message, str):
                message = str(message)
        except (ValueError, AttributeError):
            message = response.text or f"HTTP {response.status_code}"

        if response.status_code in (401, 403):
            raise AuthenticationError(response.status_code, message)
        if response.status_code == 404:
            raise InboxNotFoundError(response.status_code, message)

        raise ApiError(response.status_code, message)

    def _decode(self, response: httpx.Response, expected: type[_T]) -> _T:
        """Decode a JSON response body and check its top-level type.

        Args:
            response: The HTTP response.
            expected: ``list`` or ``dict``.

        Returns:
            The decoded document.

        Raises:
            DecodeError: If the body is not JSON or not of the expected type.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Malformed JSON response (HTTP {response.status_code}): {e}") from e

        if not isinstance(data, expected):
            raise DecodeError(
                f"Expected a JSON {expected.__name__} (HTTP {response.status_code}), "
                f"got {type(data).__name__}"
            )
        return data

    def _decode_objects(self, response: httpx.Response) -> list[dict[str, Any]]:
        """Decode a JSON list whose every element is an object.

        Raises:
            DecodeError: If the body is not a JSON list of objects.
        """
        data = self._decode(response, list)
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(
                    f"Expected a JSON list of objects (HTTP {response.status_code}), "
                    f"got {type(item).__name__} at index {index}"
                )
        return data
