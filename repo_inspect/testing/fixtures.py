"""
Pytest fixtures for repo-inspect testing.

Provides common fixtures and sample-data factories for testing code that
consumes governance records.
"""

from typing import Any, Generator

import pytest

from repo_inspect.testing.mock import MockGitHubClient
from repo_inspect.types.access import Collaborator, Team
from repo_inspect.types.governance import GovernanceRecord
from repo_inspect.types.issues import Label, Milestone
from repo_inspect.types.repos import (
    RepositoryIdentity,
    RepositorySettings,
    SecuritySettings,
)
from repo_inspect.types.rulesets import Ruleset


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_ruleset(**overrides: Any) -> Ruleset:
    """
    Create a ruleset protecting ``main`` with sensible defaults.

    Example:
        ```python
        ruleset = create_mock_ruleset(name="release", pattern="release/*")
        ```
    """
    defaults: dict[str, Any] = {
        "name": "Main Branch Protection",
        "pattern": "main",
        "enforce_admins": True,
        "required_status_checks": ["ci/build", "ci/test"],
        "required_pull_request_reviews": True,
        "required_approving_review_count": 2,
        "dismiss_stale_reviews": True,
        "require_code_owner_reviews": True,
        "required_linear_history": True,
        "allow_force_pushes": False,
        "allow_deletions": False,
        "required_conversation_resolution": True,
    }
    defaults.update(overrides)
    return Ruleset(**defaults)


def create_mock_record(
    owner: str = "octo-org",
    name: str = "hello-world",
    **overrides: Any,
) -> GovernanceRecord:
    """
    Create a GovernanceRecord with every facet populated.

    Any facet can be replaced through keyword arguments.
    """
    facets: dict[str, Any] = {
        "repository_settings": RepositorySettings(
            default_branch="main",
            allow_merge_commit=True,
            allow_squash_merge=True,
            allow_rebase_merge=True,
            delete_branch_on_merge=True,
            has_issues=True,
        ),
        "security_settings": SecuritySettings(
            vulnerability_alerts=True,
            automated_security_fixes=True,
            secret_scanning=True,
            secret_scanning_push_protection=True,
            dependency_graph_enabled=True,
        ),
        "rulesets": [
            create_mock_ruleset(),
            create_mock_ruleset(
                name="Release Branches",
                pattern="release/*",
                enforce_admins=False,
                required_status_checks=["ci/build"],
                required_approving_review_count=1,
                require_code_owner_reviews=False,
                required_linear_history=False,
            ),
        ],
        "required_checks": ["ci/build", "ci/test"],
        "collaborators": [
            Collaborator(login="maintainer1", permission="admin", type="User"),
            Collaborator(login="developer1", permission="write", type="User"),
        ],
        "teams": [
            Team(name="Core Team", slug="core-team", permission="admin"),
            Team(name="Contributors", slug="contributors", permission="write"),
            Team(name="Reviewers", slug="reviewers", permission="triage"),
        ],
        "issue_labels": [
            Label(name="bug", color="d73a4a", description="Something isn't working"),
            Label(name="enhancement", color="a2eeef", description="New feature or request"),
            Label(name="good first issue", color="7057ff"),
        ],
        "milestones": [
            Milestone(
                title="v1.0.0",
                state="open",
                description="First stable release",
                due_on="2024-06-30",
            ),
            Milestone(title="v0.9.0", state="closed"),
        ],
    }
    facets.update(overrides)
    return GovernanceRecord(
        repository=RepositoryIdentity(owner=owner, name=name),
        **facets,
    )


def configure_mock_client(
    client: MockGitHubClient, record: GovernanceRecord
) -> MockGitHubClient:
    """Configure every mock resource to answer with the facets of ``record``."""
    client.repos.configure_get_settings(response=record.repository_settings)
    client.rulesets.configure_list(response=record.rulesets)
    client.access.configure_list_collaborators(response=record.collaborators)
    client.access.configure_list_teams(response=record.teams)
    client.security.configure_get(response=record.security_settings)
    client.issues.configure_list_labels(response=record.issue_labels)
    client.issues.configure_list_milestones(response=record.milestones)
    return client


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.access.configure_list_teams(response=[my_team])
            record = collect(mock_client, "octo-org", "hello-world")
            assert mock_client.was_called("access.list_teams")
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def sample_record() -> GovernanceRecord:
    """Provide a fully populated GovernanceRecord."""
    return create_mock_record()


@pytest.fixture
def mock_client_with_record(
    mock_client: MockGitHubClient, sample_record: GovernanceRecord
) -> MockGitHubClient:
    """Provide a mock client that answers with the facets of ``sample_record``."""
    return configure_mock_client(mock_client, sample_record)


@pytest.fixture
def sample_ruleset() -> Ruleset:
    """Provide a sample ruleset."""
    return create_mock_ruleset()
