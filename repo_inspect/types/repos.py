"""Repository-level data models."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class RepositoryIdentity:
    """Owner and name of the inspected repository."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ValueError("repository owner and name must be non-empty")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {"owner": self.owner, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepositoryIdentity":
        return cls(owner=data["owner"], name=data["name"])


@dataclass
class RepositorySettings:
    """Repository configuration flags."""

    private: bool = False
    archived: bool = False
    disabled: bool = False
    default_branch: str = ""
    allow_merge_commit: bool = False
    allow_squash_merge: bool = False
    allow_rebase_merge: bool = False
    allow_auto_merge: bool = False
    delete_branch_on_merge: bool = False
    has_issues: bool = False
    has_projects: bool = False
    has_wiki: bool = False
    has_downloads: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepositorySettings":
        return cls(
            private=bool(data.get("private", False)),
            archived=bool(data.get("archived", False)),
            disabled=bool(data.get("disabled", False)),
            default_branch=data.get("default_branch") or "",
            allow_merge_commit=bool(data.get("allow_merge_commit", False)),
            allow_squash_merge=bool(data.get("allow_squash_merge", False)),
            allow_rebase_merge=bool(data.get("allow_rebase_merge", False)),
            allow_auto_merge=bool(data.get("allow_auto_merge", False)),
            delete_branch_on_merge=bool(data.get("delete_branch_on_merge", False)),
            has_issues=bool(data.get("has_issues", False)),
            has_projects=bool(data.get("has_projects", False)),
            has_wiki=bool(data.get("has_wiki", False)),
            has_downloads=bool(data.get("has_downloads", False)),
        )


@dataclass
class SecuritySettings:
    """Security feature toggles."""

    vulnerability_alerts: bool = False
    automated_security_fixes: bool = False
    secret_scanning: bool = False
    secret_scanning_push_protection: bool = False
    dependency_graph_enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SecuritySettings":
        return cls(
            vulnerability_alerts=bool(data.get("vulnerability_alerts", False)),
            automated_security_fixes=bool(data.get("automated_security_fixes", False)),
            secret_scanning=bool(data.get("secret_scanning", False)),
            secret_scanning_push_protection=bool(
                data.get("secret_scanning_push_protection", False)
            ),
            dependency_graph_enabled=bool(data.get("dependency_graph_enabled", False)),
        )
