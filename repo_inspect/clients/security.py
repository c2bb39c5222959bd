"""Security settings resource client."""

from typing import TYPE_CHECKING, Any

from repo_inspect.exceptions import NotFoundError
from repo_inspect.types.repos import SecuritySettings

if TYPE_CHECKING:
    from repo_inspect.transport import HTTPTransport


def _enabled(analysis: dict[str, Any], feature: str) -> bool | None:
    status = (analysis.get(feature) or {}).get("status")
    if status is None:
        return None
    return status == "enabled"


class SecurityClient:
    """Client for repository security features."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the security client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def vulnerability_alerts_enabled(self, owner: str, name: str) -> bool:
        """
        Check whether vulnerability alerts are enabled.

        The endpoint answers 204 when enabled and 404 when disabled.
        """
        try:
            self.transport.get(f"/repos/{owner}/{name}/vulnerability-alerts")
        except NotFoundError:
            return False
        return True

    def get(self, owner: str, name: str) -> SecuritySettings:
        """
        Get security feature toggles.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            SecuritySettings

        Raises:
            NotFoundError: If repository not found
            AuthorizationError: If the token lacks admin access to the repository
        """
        repo = self.transport.get(f"/repos/{owner}/{name}") or {}
        analysis = repo.get("security_and_analysis") or {}
        alerts = self.vulnerability_alerts_enabled(owner, name)

        dependency_graph = _enabled(analysis, "dependency_graph")
        if dependency_graph is None:
            # Dependabot alerts cannot be on without the dependency graph
            dependency_graph = alerts

        return SecuritySettings(
            vulnerability_alerts=alerts,
            automated_security_fixes=bool(_enabled(analysis, "dependabot_security_updates")),
            secret_scanning=bool(_enabled(analysis, "secret_scanning")),
            secret_scanning_push_protection=bool(
                _enabled(analysis, "secret_scanning_push_protection")
            ),
            dependency_graph_enabled=dependency_graph,
        )
