"""Repositories resource client."""

from typing import TYPE_CHECKING

from repo_inspect.types.repos import RepositorySettings

if TYPE_CHECKING:
    from repo_inspect.transport import HTTPTransport


class ReposClient:
    """Client for repository-level settings."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get_settings(self, owner: str, name: str) -> RepositorySettings:
        """
        Get repository configuration flags.

        Args:
            owner: Repository owner (user or organization)
            name: Repository name

        Returns:
            RepositorySettings with visibility, merge strategy and feature toggles

        Raises:
            NotFoundError: If repository not found
        """
        data = self.transport.get(f"/repos/{owner}/{name}")
        # Wire field names match the serialized settings names
        return RepositorySettings.from_dict(data or {})
