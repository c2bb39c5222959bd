"""
HTTP Transport for repo-inspect.

Handles authenticated, read-only HTTP communication with the hosting API and
maps error responses onto typed exceptions.
"""

import time
from typing import Any

import httpx

from repo_inspect.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RepoInspectError,
    ServerError,
    ValidationError,
)
from repo_inspect.logging import log_http_request, log_http_response

API_VERSION = "2022-11-28"


class HTTPTransport:
    """
    HTTP transport layer for GET requests against the REST API.

    Handles:
    - Bearer token authentication and API version headers
    - Request/response debug logging with the token masked
    - Error response parsing into typed exceptions

    Requests are issued once; there is no retry.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Access token sent as a bearer credential
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue a GET request and return the decoded JSON body.

        Args:
            path: API path (e.g., "/repos/octo/hello/labels")
            params: Query parameters

        Returns:
            Parsed JSON response (dict or list), or None for an empty body

        Raises:
            RepoInspectError: On API or connection errors
        """
        log_http_request("GET", path, headers=dict(self._client.headers), params=params)
        started = time.monotonic()

        try:
            response = self._client.request("GET", path, params=params)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        elapsed_ms = (time.monotonic() - started) * 1000
        log_http_response(
            response.status_code,
            path,
            elapsed_ms=elapsed_ms,
            request_id=response.headers.get("X-GitHub-Request-Id"),
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ServerError("INVALID_RESPONSE", f"invalid JSON from {path}") from e

    def _parse_error_response(self, response: httpx.Response) -> RepoInspectError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RepoInspectError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}

        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError(f"HTTP_{status_code}", message, request_id)
