"""
Governance collection.

One collector per facet, each issuing its own read-only query and assigning
its facet on the record only once the whole query succeeded. The aggregator
runs them in a fixed order, strictly one after another, and never lets a
single facet's failure abort the run.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from repo_inspect import sections
from repo_inspect.exceptions import RepoInspectError, ServerError
from repo_inspect.logging import get_logger
from repo_inspect.types.governance import GovernanceRecord
from repo_inspect.types.repos import RepositoryIdentity

if TYPE_CHECKING:
    from repo_inspect.client import GitHubClient

logger = get_logger("collect")

STATUS_OK = "ok"
STATUS_FAILED = "failed"
STATUS_SKIPPED = "skipped"


@dataclass
class CollectorResult:
    """Outcome of one collector in an aggregation run."""

    section: str
    status: str  # "ok", "failed" or "skipped"
    error: RepoInspectError | None = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def fetch_settings(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.repository_settings = client.repos.get_settings(owner, name)


def fetch_rulesets(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    rulesets = client.rulesets.list(owner, name)

    required_checks: list[str] = []
    for ruleset in rulesets:
        for check in ruleset.required_status_checks:
            if check not in required_checks:
                required_checks.append(check)

    record.rulesets = rulesets
    record.required_checks = required_checks


def fetch_collaborators(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.collaborators = client.access.list_collaborators(owner, name)


def fetch_teams(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.teams = client.access.list_teams(owner, name)


def fetch_security(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.security_settings = client.security.get(owner, name)


def fetch_labels(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.issue_labels = client.issues.list_labels(owner, name)


def fetch_milestones(client: "GitHubClient", owner: str, name: str, record: GovernanceRecord) -> None:
    record.milestones = client.issues.list_milestones(owner, name)


Collector = Callable[["GitHubClient", str, str, GovernanceRecord], None]

# Invocation order; settings always runs regardless of the section filter.
COLLECTORS: tuple[tuple[str, Collector], ...] = (
    (sections.SETTINGS, fetch_settings),
    (sections.RULESETS, fetch_rulesets),
    (sections.COLLABORATORS, fetch_collaborators),
    (sections.TEAMS, fetch_teams),
    (sections.SECURITY, fetch_security),
    (sections.LABELS, fetch_labels),
    (sections.MILESTONES, fetch_milestones),
)

# Human-readable facet names for diagnostics
_FACET_NAMES = {
    sections.SETTINGS: "repository settings",
    sections.RULESETS: "rulesets",
    sections.COLLABORATORS: "collaborators",
    sections.TEAMS: "teams",
    sections.SECURITY: "security settings",
    sections.LABELS: "labels",
    sections.MILESTONES: "milestones",
}


def collect_with_results(
    client: "GitHubClient",
    owner: str,
    name: str,
    section_filter: Sequence[str] = (),
) -> tuple[GovernanceRecord, list[CollectorResult]]:
    """
    Collect every selected facet into a new GovernanceRecord.

    Args:
        client: Client exposing the resource clients used by the collectors
        owner: Repository owner
        name: Repository name
        section_filter: Allow-list of section names; empty means all

    Returns:
        The populated record and one CollectorResult per collector, in
        invocation order
    """
    record = GovernanceRecord(repository=RepositoryIdentity(owner=owner, name=name))
    results: list[CollectorResult] = []

    logger.info("Inspecting repository: %s", record.repository.full_name)

    for section, collector in COLLECTORS:
        if section != sections.SETTINGS and not sections.included(section_filter, section):
            results.append(CollectorResult(section, STATUS_SKIPPED))
            continue

        try:
            try:
                collector(client, owner, name, record)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise ServerError(
                    "INVALID_RESPONSE", f"unexpected response shape: {e!r}"
                ) from e
        except RepoInspectError as e:
            logger.warning("failed to get %s: %s", _FACET_NAMES[section], e.message)
            results.append(CollectorResult(section, STATUS_FAILED, e))
        else:
            results.append(CollectorResult(section, STATUS_OK))

    return record, results


def collect(
    client: "GitHubClient",
    owner: str,
    name: str,
    section_filter: Sequence[str] = (),
) -> GovernanceRecord:
    """Collect selected facets, discarding the per-collector results."""
    record, _ = collect_with_results(client, owner, name, section_filter)
    return record
