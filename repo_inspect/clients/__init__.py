"""repo-inspect resource clients."""

from repo_inspect.clients.access import AccessClient
from repo_inspect.clients.issues import IssuesClient
from repo_inspect.clients.repos import ReposClient
from repo_inspect.clients.rulesets import RulesetsClient
from repo_inspect.clients.security import SecurityClient

__all__ = [
    "AccessClient",
    "IssuesClient",
    "ReposClient",
    "RulesetsClient",
    "SecurityClient",
]
