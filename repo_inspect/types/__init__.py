"""repo-inspect type definitions.

This module exports all data model types used by the package.
"""

from repo_inspect.types.access import Collaborator, Team
from repo_inspect.types.governance import GovernanceRecord
from repo_inspect.types.issues import Label, Milestone
from repo_inspect.types.repos import (
    RepositoryIdentity,
    RepositorySettings,
    SecuritySettings,
)
from repo_inspect.types.rulesets import Ruleset

__all__ = [
    # Repository types
    "RepositoryIdentity",
    "RepositorySettings",
    "SecuritySettings",
    # Ruleset types
    "Ruleset",
    # Access types
    "Collaborator",
    "Team",
    # Issue types
    "Label",
    "Milestone",
    # Aggregate
    "GovernanceRecord",
]
