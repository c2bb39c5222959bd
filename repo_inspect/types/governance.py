"""Aggregate governance record."""

from dataclasses import dataclass, field
from typing import Any

from repo_inspect.types.access import Collaborator, Team
from repo_inspect.types.issues import Label, Milestone
from repo_inspect.types.repos import (
    RepositoryIdentity,
    RepositorySettings,
    SecuritySettings,
)
from repo_inspect.types.rulesets import Ruleset


@dataclass
class GovernanceRecord:
    """
    Every governance facet collected for one repository.

    Facets whose collector was skipped or failed keep their zero value; the
    record does not tell those cases apart from a legitimately empty facet.
    Empty sequences are dropped from the serialized form.
    """

    repository: RepositoryIdentity
    repository_settings: RepositorySettings = field(default_factory=RepositorySettings)
    security_settings: SecuritySettings = field(default_factory=SecuritySettings)
    rulesets: list[Ruleset] = field(default_factory=list)
    required_checks: list[str] = field(default_factory=list)
    collaborators: list[Collaborator] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    issue_labels: list[Label] = field(default_factory=list)
    milestones: list[Milestone] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the contract field names, in contract order."""
        data: dict[str, Any] = {"repository": self.repository.to_dict()}
        if self.rulesets:
            data["rulesets"] = [r.to_dict() for r in self.rulesets]
        if self.required_checks:
            data["required_checks"] = list(self.required_checks)
        if self.collaborators:
            data["collaborators"] = [c.to_dict() for c in self.collaborators]
        if self.teams:
            data["teams"] = [t.to_dict() for t in self.teams]
        data["security_settings"] = self.security_settings.to_dict()
        data["repository_settings"] = self.repository_settings.to_dict()
        if self.issue_labels:
            data["issue_labels"] = [lbl.to_dict() for lbl in self.issue_labels]
        if self.milestones:
            data["milestones"] = [m.to_dict() for m in self.milestones]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GovernanceRecord":
        """Rebuild a record from its serialized form."""
        return cls(
            repository=RepositoryIdentity.from_dict(data["repository"]),
            repository_settings=RepositorySettings.from_dict(
                data.get("repository_settings") or {}
            ),
            security_settings=SecuritySettings.from_dict(
                data.get("security_settings") or {}
            ),
            rulesets=[Ruleset.from_dict(r) for r in data.get("rulesets") or []],
            required_checks=list(data.get("required_checks") or []),
            collaborators=[
                Collaborator.from_dict(c) for c in data.get("collaborators") or []
            ],
            teams=[Team.from_dict(t) for t in data.get("teams") or []],
            issue_labels=[Label.from_dict(lbl) for lbl in data.get("issue_labels") or []],
            milestones=[Milestone.from_dict(m) for m in data.get("milestones") or []],
        )
