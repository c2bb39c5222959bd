"""repo-inspect - read-only discovery of repository governance configuration."""

from repo_inspect.client import GitHubClient
from repo_inspect.collect import CollectorResult, collect, collect_with_results
from repo_inspect.exceptions import (
    ArgumentError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    EncodingError,
    FormatError,
    NotFoundError,
    RepoInspectError,
    ResolutionError,
    ServerError,
    ValidationError,
)
from repo_inspect.logging import configure_logging, get_logger
from repo_inspect.render import render
from repo_inspect.sections import SECTIONS, included
from repo_inspect.transport import HTTPTransport
from repo_inspect.types import (
    Collaborator,
    GovernanceRecord,
    Label,
    Milestone,
    RepositoryIdentity,
    RepositorySettings,
    Ruleset,
    SecuritySettings,
    Team,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "GitHubClient",
    # Aggregation
    "collect",
    "collect_with_results",
    "CollectorResult",
    # Section filter
    "SECTIONS",
    "included",
    # Rendering
    "render",
    # Types
    "GovernanceRecord",
    "RepositoryIdentity",
    "RepositorySettings",
    "SecuritySettings",
    "Ruleset",
    "Collaborator",
    "Team",
    "Label",
    "Milestone",
    # Exceptions
    "RepoInspectError",
    "ConfigurationError",
    "ArgumentError",
    "ResolutionError",
    "FormatError",
    "EncodingError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
