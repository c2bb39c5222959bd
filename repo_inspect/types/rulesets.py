"""Branch protection ruleset data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Ruleset:
    """A named branch-protection rule bound to a branch-name pattern.

    The approving-review count and the two review flags are only meaningful
    when ``required_pull_request_reviews`` is true.
    """

    name: str
    pattern: str
    enforce_admins: bool = False
    required_status_checks: list[str] = field(default_factory=list)
    required_pull_request_reviews: bool = False
    required_approving_review_count: int = 0
    dismiss_stale_reviews: bool = False
    require_code_owner_reviews: bool = False
    required_linear_history: bool = False
    allow_force_pushes: bool = False
    allow_deletions: bool = False
    required_conversation_resolution: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "pattern": self.pattern,
            "enforce_admins": self.enforce_admins,
        }
        if self.required_status_checks:
            data["required_status_checks"] = list(self.required_status_checks)
        data.update(
            {
                "required_pull_request_reviews": self.required_pull_request_reviews,
                "required_approving_review_count": self.required_approving_review_count,
                "dismiss_stale_reviews": self.dismiss_stale_reviews,
                "require_code_owner_reviews": self.require_code_owner_reviews,
                "required_linear_history": self.required_linear_history,
                "allow_force_pushes": self.allow_force_pushes,
                "allow_deletions": self.allow_deletions,
                "required_conversation_resolution": self.required_conversation_resolution,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ruleset":
        return cls(
            name=data["name"],
            pattern=data.get("pattern", ""),
            enforce_admins=bool(data.get("enforce_admins", False)),
            required_status_checks=list(data.get("required_status_checks") or []),
            required_pull_request_reviews=bool(
                data.get("required_pull_request_reviews", False)
            ),
            required_approving_review_count=int(
                data.get("required_approving_review_count", 0)
            ),
            dismiss_stale_reviews=bool(data.get("dismiss_stale_reviews", False)),
            require_code_owner_reviews=bool(data.get("require_code_owner_reviews", False)),
            required_linear_history=bool(data.get("required_linear_history", False)),
            allow_force_pushes=bool(data.get("allow_force_pushes", False)),
            allow_deletions=bool(data.get("allow_deletions", False)),
            required_conversation_resolution=bool(
                data.get("required_conversation_resolution", False)
            ),
        )
