"""
Output rendering for governance records.

JSON and YAML serialize ``GovernanceRecord.to_dict()``; the table format is a
box-drawing tree meant for humans. The full output is built before anything
is written, so a failure never leaves partial output behind.
"""

import json
import sys
from collections.abc import Sequence
from typing import TextIO

import yaml

from repo_inspect import sections
from repo_inspect.exceptions import EncodingError, FormatError
from repo_inspect.types.governance import GovernanceRecord

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"
FORMAT_TABLE = "table"

_FORMAT_ALIASES = {
    "json": FORMAT_JSON,
    "yaml": FORMAT_YAML,
    "yml": FORMAT_YAML,
    "table": FORMAT_TABLE,
}

BRANCH = "├─"
LAST_BRANCH = "└─"

TRUE_ICON = "✅"
FALSE_ICON = "❌"

PERMISSION_ICONS = {
    "admin": "👑",
    "maintain": "🔧",
    "write": "✏️",
    "triage": "📋",
    "read": "👀",
}
UNKNOWN_PERMISSION_ICON = "❓"

OPEN_ICON = "🟢"
CLOSED_ICON = "🔴"


def normalize_format(output_format: str) -> str:
    """
    Resolve a user-supplied format name, case-insensitively.

    Raises:
        FormatError: If the format is not json, yaml, yml or table
    """
    try:
        return _FORMAT_ALIASES[output_format.lower()]
    except KeyError:
        raise FormatError(output_format) from None


def bool_icon(value: bool) -> str:
    return TRUE_ICON if value else FALSE_ICON


def permission_icon(permission: str) -> str:
    icon = PERMISSION_ICONS.get(permission, UNKNOWN_PERMISSION_ICON)
    return f"{icon} {permission}" if permission else icon


def _branch(index: int, count: int) -> str:
    return LAST_BRANCH if index == count - 1 else BRANCH


def to_json(record: GovernanceRecord) -> str:
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"


def to_yaml(record: GovernanceRecord) -> str:
    return yaml.safe_dump(
        record.to_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def to_table(record: GovernanceRecord, section_filter: Sequence[str] = ()) -> str:
    """Render the record as a tree, section by section."""
    lines = [
        "Repository Governance Report",
        "═══════════════════════════",
        "",
        f"📁 Repository: {record.repository.full_name}",
        "",
    ]

    if sections.included(section_filter, sections.SETTINGS):
        repo = record.repository_settings
        lines.extend([
            "⚙️  Repository Settings",
            f"{BRANCH} Private: {bool_icon(repo.private)}",
            f"{BRANCH} Archived: {bool_icon(repo.archived)}",
            f"{BRANCH} Default Branch: {repo.default_branch}",
            f"{BRANCH} Issues: {bool_icon(repo.has_issues)}",
            f"{BRANCH} Projects: {bool_icon(repo.has_projects)}",
            f"{BRANCH} Wiki: {bool_icon(repo.has_wiki)}",
            f"{BRANCH} Allow Merge Commit: {bool_icon(repo.allow_merge_commit)}",
            f"{BRANCH} Allow Squash Merge: {bool_icon(repo.allow_squash_merge)}",
            f"{BRANCH} Allow Rebase Merge: {bool_icon(repo.allow_rebase_merge)}",
            f"{LAST_BRANCH} Delete Branch on Merge: {bool_icon(repo.delete_branch_on_merge)}",
            "",
        ])

    if sections.included(section_filter, sections.SECURITY):
        security = record.security_settings
        lines.extend([
            "🔒 Security Settings",
            f"{BRANCH} Vulnerability Alerts: {bool_icon(security.vulnerability_alerts)}",
            f"{BRANCH} Automated Security Fixes: {bool_icon(security.automated_security_fixes)}",
            f"{BRANCH} Secret Scanning: {bool_icon(security.secret_scanning)}",
            f"{BRANCH} Secret Scanning Push Protection: "
            f"{bool_icon(security.secret_scanning_push_protection)}",
            f"{LAST_BRANCH} Dependency Graph: {bool_icon(security.dependency_graph_enabled)}",
            "",
        ])

    if record.rulesets and sections.included(section_filter, sections.RULESETS):
        lines.append("📜 Repository Rulesets")
        count = len(record.rulesets)
        for i, ruleset in enumerate(record.rulesets):
            lines.append(f"{_branch(i, count)} {ruleset.name} (Pattern: {ruleset.pattern})")
            lines.append(f"   {BRANCH} Enforce Admins: {bool_icon(ruleset.enforce_admins)}")
            lines.append(
                f"   {BRANCH} Require PR Reviews: "
                f"{bool_icon(ruleset.required_pull_request_reviews)}"
            )
            if ruleset.required_pull_request_reviews:
                lines.extend([
                    f"   │  {BRANCH} Required Approving Reviews: "
                    f"{ruleset.required_approving_review_count}",
                    f"   │  {BRANCH} Dismiss Stale Reviews: "
                    f"{bool_icon(ruleset.dismiss_stale_reviews)}",
                    f"   │  {LAST_BRANCH} Require Code Owner Reviews: "
                    f"{bool_icon(ruleset.require_code_owner_reviews)}",
                ])
            lines.extend([
                f"   {BRANCH} Required Linear History: "
                f"{bool_icon(ruleset.required_linear_history)}",
                f"   {BRANCH} Allow Force Pushes: {bool_icon(ruleset.allow_force_pushes)}",
                f"   {BRANCH} Allow Deletions: {bool_icon(ruleset.allow_deletions)}",
                f"   {BRANCH} Require Conversation Resolution: "
                f"{bool_icon(ruleset.required_conversation_resolution)}",
            ])

            checks = ruleset.required_status_checks
            if checks:
                lines.append(f"   {LAST_BRANCH} Required Status Checks:")
                for j, check in enumerate(checks):
                    lines.append(f"      {_branch(j, len(checks))} {check}")
            else:
                lines.append(f"   {LAST_BRANCH} Required Status Checks: None")

            if i < count - 1:
                lines.append("   ")
        lines.append("")

    if record.collaborators and sections.included(section_filter, sections.COLLABORATORS):
        count = len(record.collaborators)
        lines.append(f"👥 Collaborators ({count})")
        for i, collab in enumerate(record.collaborators):
            lines.append(
                f"{_branch(i, count)} {collab.login} ({collab.type}) - "
                f"{permission_icon(collab.permission)}"
            )
        lines.append("")

    if record.teams and sections.included(section_filter, sections.TEAMS):
        count = len(record.teams)
        lines.append(f"Teams ({count})")
        for i, team in enumerate(record.teams):
            lines.append(
                f"{_branch(i, count)} {team.name} (@{team.slug}) - "
                f"{permission_icon(team.permission)}"
            )
        lines.append("")

    if record.issue_labels and sections.included(section_filter, sections.LABELS):
        count = len(record.issue_labels)
        lines.append(f"🏷️  Labels ({count})")
        for i, label in enumerate(record.issue_labels):
            description = f" ({label.description})" if label.description else ""
            lines.append(f"{_branch(i, count)} {label.name} #{label.color}{description}")
        lines.append("")

    if record.milestones and sections.included(section_filter, sections.MILESTONES):
        count = len(record.milestones)
        lines.append(f"🎯 Milestones ({count})")
        for i, milestone in enumerate(record.milestones):
            state = CLOSED_ICON if milestone.state == "closed" else OPEN_ICON
            due = f" (Due: {milestone.due_on})" if milestone.due_on else ""
            lines.append(f"{_branch(i, count)} {state} {milestone.title}{due}")
            if milestone.description:
                lines.append(f"   {milestone.description}")
        lines.append("")

    return "\n".join(lines) + "\n"


def format_record(
    record: GovernanceRecord,
    output_format: str,
    section_filter: Sequence[str] = (),
) -> str:
    """
    Encode the record in the requested format.

    Raises:
        FormatError: On an unsupported format, before any encoding
        EncodingError: If the encoder fails
    """
    resolved = normalize_format(output_format)

    try:
        if resolved == FORMAT_JSON:
            return to_json(record)
        if resolved == FORMAT_YAML:
            return to_yaml(record)
        return to_table(record, section_filter)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise EncodingError(f"failed to encode {resolved} output: {e}") from e


def render(
    record: GovernanceRecord,
    output_format: str,
    section_filter: Sequence[str] = (),
    stream: TextIO | None = None,
) -> None:
    """
    Write the record to ``stream`` (standard output by default).

    Raises:
        FormatError: On an unsupported format; nothing is written
        EncodingError: If encoding or writing fails
    """
    text = format_record(record, output_format, section_filter)
    out = stream if stream is not None else sys.stdout

    try:
        out.write(text)
        out.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise EncodingError(f"failed to write output: {e}") from e
