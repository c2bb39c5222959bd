"""Section filter shared by collection and rendering."""

from collections.abc import Iterable, Sequence

SETTINGS = "settings"
SECURITY = "security"
RULESETS = "rulesets"
COLLABORATORS = "collaborators"
TEAMS = "teams"
LABELS = "labels"
MILESTONES = "milestones"

SECTIONS = (SETTINGS, SECURITY, RULESETS, COLLABORATORS, TEAMS, LABELS, MILESTONES)


def included(section_filter: Sequence[str], section: str) -> bool:
    """Return True if ``section`` passes the allow-list.

    An empty allow-list includes everything. Matching is exact and
    case-sensitive; unknown names never match anything.
    """
    if not section_filter:
        return True
    return section in section_filter


def parse_sections(values: Iterable[str] | None) -> tuple[str, ...]:
    """Split comma-separated ``--sections`` values into a flat tuple."""
    if not values:
        return ()
    return tuple(
        part for value in values for part in value.split(",") if part
    )
