"""Issue label and milestone data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Label:
    """Issue label. Color is a hex string without the leading '#'."""

    name: str
    color: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "color": self.color}
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Label":
        return cls(
            name=data["name"],
            color=data.get("color", ""),
            description=data.get("description") or "",
        )


@dataclass
class Milestone:
    """Milestone information."""

    title: str
    state: str = "open"  # "open" or "closed"
    description: str = ""
    due_on: str = ""  # ISO date, e.g. "2024-06-30"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title}
        if self.description:
            data["description"] = self.description
        data["state"] = self.state
        if self.due_on:
            data["due_on"] = self.due_on
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Milestone":
        return cls(
            title=data["title"],
            state=data.get("state", "open"),
            description=data.get("description") or "",
            due_on=data.get("due_on") or "",
        )
