"""
Tests for governance collection.

Feature: repo-inspect
"""

import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from repo_inspect.collect import (
    COLLECTORS,
    STATUS_FAILED,
    STATUS_OK,
    STATUS_SKIPPED,
    collect,
    collect_with_results,
)
from repo_inspect.exceptions import AuthorizationError, NotFoundError, ServerError
from repo_inspect.sections import SECTIONS
from repo_inspect.testing import (
    MockGitHubClient,
    create_mock_ruleset,
)
from repo_inspect.types import GovernanceRecord

SECTION_CALLS = {
    "settings": "repos.get_settings",
    "rulesets": "rulesets.list",
    "collaborators": "access.list_collaborators",
    "teams": "access.list_teams",
    "security": "security.get",
    "labels": "issues.list_labels",
    "milestones": "issues.list_milestones",
}


@given(section_filter=st.lists(st.sampled_from(SECTIONS + ("unknown",)), max_size=4))
@settings(max_examples=50)
def test_filter_decides_which_collectors_run(section_filter: list[str]) -> None:
    """Settings always runs; every other collector runs iff the filter includes it."""
    mock = MockGitHubClient()
    collect(mock, "octo-org", "hello-world", section_filter)

    for section, method in SECTION_CALLS.items():
        expected = section == "settings" or not section_filter or section in section_filter
        assert mock.was_called(method) == expected, section


class TestCollect:
    """Aggregator behaviour."""

    def test_collects_every_facet(
        self, mock_client_with_record: MockGitHubClient, sample_record: GovernanceRecord
    ) -> None:
        record = collect(mock_client_with_record, "octo-org", "hello-world")
        assert record == sample_record

    def test_fixed_invocation_order(self, mock_client: MockGitHubClient) -> None:
        collect(mock_client, "octo-org", "hello-world")

        assert [call.method for call in mock_client.get_calls()] == [
            "repos.get_settings",
            "rulesets.list",
            "access.list_collaborators",
            "access.list_teams",
            "security.get",
            "issues.list_labels",
            "issues.list_milestones",
        ]
        assert [section for section, _ in COLLECTORS] == [
            "settings",
            "rulesets",
            "collaborators",
            "teams",
            "security",
            "labels",
            "milestones",
        ]

    def test_calls_carry_owner_and_name(self, mock_client: MockGitHubClient) -> None:
        collect(mock_client, "octo-org", "hello-world")
        assert all(call.args == ("octo-org", "hello-world") for call in mock_client.get_calls())

    def test_settings_ignore_the_filter(self, mock_client: MockGitHubClient) -> None:
        collect(mock_client, "octo-org", "hello-world", ["labels"])

        assert mock_client.was_called("repos.get_settings")
        assert mock_client.was_called("issues.list_labels")
        assert mock_client.call_count("access.list_teams") == 0

    def test_one_failure_does_not_abort(
        self, mock_client_with_record: MockGitHubClient, sample_record: GovernanceRecord
    ) -> None:
        mock_client_with_record.access.configure_list_teams(
            error=NotFoundError("NOT_FOUND", "Not Found")
        )

        record = collect(mock_client_with_record, "octo-org", "hello-world")

        assert record.teams == []
        assert record.collaborators == sample_record.collaborators
        assert record.security_settings == sample_record.security_settings
        assert record.issue_labels == sample_record.issue_labels
        assert record.milestones == sample_record.milestones
        assert mock_client_with_record.was_called("issues.list_milestones")

    def test_every_collector_failing_still_returns_identity(
        self, mock_client: MockGitHubClient
    ) -> None:
        error = AuthorizationError("FORBIDDEN", "Resource not accessible")
        mock_client.repos.configure_get_settings(error=error)
        mock_client.rulesets.configure_list(error=error)
        mock_client.access.configure_list_collaborators(error=error)
        mock_client.access.configure_list_teams(error=error)
        mock_client.security.configure_get(error=error)
        mock_client.issues.configure_list_labels(error=error)
        mock_client.issues.configure_list_milestones(error=error)

        record = collect(mock_client, "octo-org", "hello-world")

        assert record == GovernanceRecord(repository=record.repository)
        assert record.repository.full_name == "octo-org/hello-world"

    def test_malformed_payload_is_a_collector_failure(
        self, mock_client: MockGitHubClient
    ) -> None:
        mock_client.issues.configure_list_labels(error=KeyError("name"))

        record, results = collect_with_results(mock_client, "octo-org", "hello-world")

        labels = next(r for r in results if r.section == "labels")
        assert labels.status == STATUS_FAILED
        assert isinstance(labels.error, ServerError)
        assert labels.error.code == "INVALID_RESPONSE"
        assert record.issue_labels == []

    def test_wrong_payload_type_is_a_collector_failure(
        self, mock_client: MockGitHubClient
    ) -> None:
        mock_client.rulesets.configure_list(
            error=AttributeError("'str' object has no attribute 'get'")
        )

        record, results = collect_with_results(mock_client, "octo-org", "hello-world")

        rulesets = next(r for r in results if r.section == "rulesets")
        assert rulesets.status == STATUS_FAILED
        assert isinstance(rulesets.error, ServerError)
        assert rulesets.error.code == "INVALID_RESPONSE"
        assert mock_client.was_called("issues.list_milestones")
        assert [r.section for r in results if not r.ok] == ["rulesets"]

    def test_required_checks_union(self, mock_client: MockGitHubClient) -> None:
        mock_client.rulesets.configure_list(
            response=[
                create_mock_ruleset(required_status_checks=["ci/build", "ci/test"]),
                create_mock_ruleset(name="release", required_status_checks=["ci/test", "ci/e2e"]),
            ]
        )

        record = collect(mock_client, "octo-org", "hello-world")

        assert record.required_checks == ["ci/build", "ci/test", "ci/e2e"]

    def test_failed_rulesets_leave_required_checks_alone(
        self, mock_client: MockGitHubClient
    ) -> None:
        mock_client.rulesets.configure_list(error=ServerError("SERVER_ERROR", "boom"))

        record = collect(mock_client, "octo-org", "hello-world")

        assert record.rulesets == []
        assert record.required_checks == []


class TestCollectWithResults:
    """Per-collector result log."""

    def test_tri_state_results(self, mock_client: MockGitHubClient) -> None:
        error = NotFoundError("NOT_FOUND", "Not Found")
        mock_client.access.configure_list_teams(error=error)

        _, results = collect_with_results(
            mock_client, "octo-org", "hello-world", ["teams", "labels"]
        )

        assert [(r.section, r.status) for r in results] == [
            ("settings", STATUS_OK),
            ("rulesets", STATUS_SKIPPED),
            ("collaborators", STATUS_SKIPPED),
            ("teams", STATUS_FAILED),
            ("security", STATUS_SKIPPED),
            ("labels", STATUS_OK),
            ("milestones", STATUS_SKIPPED),
        ]
        assert results[3].error is error
        assert not results[3].ok
        assert results[5].ok

    def test_settings_never_skipped(self, mock_client: MockGitHubClient) -> None:
        _, results = collect_with_results(mock_client, "octo-org", "hello-world", ["nothing"])

        assert results[0].section == "settings"
        assert results[0].status == STATUS_OK
        assert all(r.status == STATUS_SKIPPED for r in results[1:])

    def test_legitimately_empty_facet_is_ok(self, mock_client: MockGitHubClient) -> None:
        mock_client.access.configure_list_teams(response=[])

        record, results = collect_with_results(mock_client, "octo-org", "hello-world")

        assert record.teams == []
        assert next(r for r in results if r.section == "teams").status == STATUS_OK


class TestDiagnostics:
    """Collector failures are logged, never raised."""

    def test_failure_logged_as_warning(
        self, mock_client: MockGitHubClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_client.access.configure_list_teams(
            error=NotFoundError("NOT_FOUND", "Not Found")
        )

        with caplog.at_level(logging.INFO, logger="repo_inspect"):
            collect(mock_client, "octo-org", "hello-world")

        messages = [record.getMessage() for record in caplog.records]
        assert "Inspecting repository: octo-org/hello-world" in messages
        assert "failed to get teams: Not Found" in messages
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

