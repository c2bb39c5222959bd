"""
repo-inspect main client.

Provides the primary interface for reading governance facets from the
hosting API.
"""

import os
from typing import Any

from repo_inspect.clients import (
    AccessClient,
    IssuesClient,
    ReposClient,
    RulesetsClient,
    SecurityClient,
)
from repo_inspect.exceptions import ConfigurationError
from repo_inspect.transport import HTTPTransport


class GitHubClient:
    """
    Main client for reading repository governance from the GitHub REST API.

    Aggregates all resource clients and handles authentication.

    Example:
        ```python
        from repo_inspect import GitHubClient

        # Create client with explicit configuration
        client = GitHubClient(token="ghp_...")

        # Or create from environment variables
        client = GitHubClient.from_env()

        # Use resource clients
        labels = client.issues.list_labels("octo-org", "hello-world")
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Personal access token or app installation token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
        """
        if not token:
            raise ConfigurationError("an access token is required")

        self.base_url = base_url
        self.timeout = timeout

        # Create transport layer
        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
        )

        # Initialize resource clients
        self.repos = ReposClient(self._transport)
        self.rulesets = RulesetsClient(self._transport)
        self.access = AccessClient(self._transport)
        self.security = SecurityClient(self._transport)
        self.issues = IssuesClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Access token (GH_TOKEN is accepted as a fallback)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Args:
            timeout: Request timeout in seconds (default: 30.0)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If no token is set
        """
        token = os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
        base_url = os.environ.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL

        if not token:
            raise ConfigurationError(
                "GITHUB_TOKEN environment variable not set (GH_TOKEN also accepted)"
            )

        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
