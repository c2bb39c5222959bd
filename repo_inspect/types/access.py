"""Access-related data models."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Collaborator:
    """Repository collaborator information."""

    login: str
    permission: str  # "admin", "maintain", "write", "triage", "read"
    type: str  # "User", "Bot", ...

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Collaborator":
        return cls(
            login=data["login"],
            permission=data.get("permission", ""),
            type=data.get("type", ""),
        )


@dataclass
class Team:
    """Team granted access to the repository."""

    name: str
    slug: str
    permission: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(
            name=data["name"],
            slug=data.get("slug", ""),
            permission=data.get("permission", ""),
        )
