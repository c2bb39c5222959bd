"""
Pytest plugin for repo-inspect testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use these fixtures in your tests, add this to
your conftest.py:

    pytest_plugins = ["repo_inspect.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from repo_inspect.testing.fixtures import (
    mock_client,
    mock_client_with_record,
    sample_record,
    sample_ruleset,
)

__all__ = [
    "mock_client",
    "mock_client_with_record",
    "sample_record",
    "sample_ruleset",
]
