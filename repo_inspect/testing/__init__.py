"""repo-inspect testing utilities.

Provides a mock client and fixtures for testing code that uses repo-inspect.
"""

from repo_inspect.testing.fixtures import (
    configure_mock_client,
    create_mock_record,
    create_mock_ruleset,
)
from repo_inspect.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "configure_mock_client",
    "create_mock_record",
    "create_mock_ruleset",
]
