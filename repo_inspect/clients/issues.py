"""Issue labels and milestones resource client."""

from typing import TYPE_CHECKING

from repo_inspect.types.issues import Label, Milestone

if TYPE_CHECKING:
    from repo_inspect.transport import HTTPTransport


class IssuesClient:
    """Client for issue labels and milestones."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the issues client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_labels(self, owner: str, name: str) -> list[Label]:
        """
        List the repository's issue labels.

        Returns:
            List of Label objects; color has no leading '#'
        """
        data = self.transport.get(
            f"/repos/{owner}/{name}/labels",
            params={"per_page": 100},
        ) or []
        return [
            Label(
                name=label["name"],
                color=(label.get("color") or "").lstrip("#"),
                description=label.get("description") or "",
            )
            for label in data
        ]

    def list_milestones(self, owner: str, name: str) -> list[Milestone]:
        """
        List open and closed milestones.

        Returns:
            List of Milestone objects; due_on is reduced to its ISO date
        """
        data = self.transport.get(
            f"/repos/{owner}/{name}/milestones",
            params={"state": "all", "per_page": 100},
        ) or []
        return [
            Milestone(
                title=milestone["title"],
                state=milestone.get("state", "open"),
                description=milestone.get("description") or "",
                # "2024-06-30T07:00:00Z" -> "2024-06-30"
                due_on=(milestone.get("due_on") or "")[:10],
            )
            for milestone in data
        ]
