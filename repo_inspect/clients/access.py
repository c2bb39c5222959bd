"""Access control resource client."""

from typing import TYPE_CHECKING, Any

from repo_inspect.types.access import Collaborator, Team

if TYPE_CHECKING:
    from repo_inspect.transport import HTTPTransport

# Highest first
PERMISSION_LEVELS = ("admin", "maintain", "push", "triage", "pull")

_LEGACY_PERMISSION_NAMES = {"push": "write", "pull": "read"}


def _collaborator_permission(data: dict[str, Any]) -> str:
    """Prefer the role name; fall back to the highest granted permission flag."""
    role = data.get("role_name")
    if role:
        return role
    permissions = data.get("permissions") or {}
    for level in PERMISSION_LEVELS:
        if permissions.get(level):
            return _LEGACY_PERMISSION_NAMES.get(level, level)
    return ""


class AccessClient:
    """Client for repository collaborators and teams."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the access client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_collaborators(self, owner: str, name: str) -> list[Collaborator]:
        """
        List repository collaborators.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            List of Collaborator objects with login, permission, type

        Raises:
            AuthorizationError: If the token cannot read collaborators
            NotFoundError: If repository not found
        """
        data = self.transport.get(
            f"/repos/{owner}/{name}/collaborators",
            params={"per_page": 100},
        ) or []
        return [
            Collaborator(
                login=collab["login"],
                permission=_collaborator_permission(collab),
                type=collab.get("type", ""),
            )
            for collab in data
        ]

    def list_teams(self, owner: str, name: str) -> list[Team]:
        """
        List teams with access to the repository.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            List of Team objects with name, slug, permission

        Raises:
            NotFoundError: If repository not found (or not organization-owned)
        """
        data = self.transport.get(
            f"/repos/{owner}/{name}/teams",
            params={"per_page": 100},
        ) or []
        return [
            Team(
                name=team["name"],
                slug=team.get("slug", ""),
                permission=_LEGACY_PERMISSION_NAMES.get(
                    team.get("permission", ""), team.get("permission", "")
                ),
            )
            for team in data
        ]
