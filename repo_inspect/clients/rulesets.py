"""Repository rulesets resource client."""

from typing import TYPE_CHECKING, Any

from repo_inspect.exceptions import ServerError
from repo_inspect.types.rulesets import Ruleset

if TYPE_CHECKING:
    from repo_inspect.transport import HTTPTransport

_BRANCH_REF_PREFIX = "refs/heads/"


def _parse_pattern(conditions: dict[str, Any] | None) -> str:
    """Render the ref-name include list as a branch pattern."""
    ref_name = (conditions or {}).get("ref_name") or {}
    includes = ref_name.get("include") or []
    patterns = [
        ref[len(_BRANCH_REF_PREFIX):] if ref.startswith(_BRANCH_REF_PREFIX) else ref
        for ref in includes
    ]
    return ", ".join(patterns)


def _parse_ruleset(data: dict[str, Any]) -> Ruleset:
    """Flatten a ruleset's rule list onto the Ruleset model."""
    rules = {rule.get("type"): rule.get("parameters") or {} for rule in data.get("rules") or []}

    ruleset = Ruleset(
        name=data.get("name", ""),
        pattern=_parse_pattern(data.get("conditions")),
        # bypass_actors is only returned to tokens with write access, so a
        # read-only token always sees enforce_admins as true
        enforce_admins=not data.get("bypass_actors"),
        required_linear_history="required_linear_history" in rules,
        allow_force_pushes="non_fast_forward" not in rules,
        allow_deletions="deletion" not in rules,
    )

    if "pull_request" in rules:
        review = rules["pull_request"]
        ruleset.required_pull_request_reviews = True
        ruleset.required_approving_review_count = int(
            review.get("required_approving_review_count", 0)
        )
        ruleset.dismiss_stale_reviews = bool(review.get("dismiss_stale_reviews_on_push", False))
        ruleset.require_code_owner_reviews = bool(review.get("require_code_owner_review", False))
        ruleset.required_conversation_resolution = bool(
            review.get("required_review_thread_resolution", False)
        )

    if "required_status_checks" in rules:
        checks = rules["required_status_checks"].get("required_status_checks") or []
        ruleset.required_status_checks = [
            check["context"] for check in checks if check.get("context")
        ]

    return ruleset


class RulesetsClient:
    """Client for branch rulesets."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the rulesets client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(self, owner: str, name: str) -> list[Ruleset]:
        """
        List the repository's branch rulesets with their rules.

        The listing endpoint omits conditions and rules, so each
        branch-targeted ruleset is fetched individually. Any failure aborts
        the whole listing.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            List of Ruleset objects in API order

        Raises:
            NotFoundError: If repository not found
            AuthorizationError: If rulesets are not readable with this token
        """
        summaries = self.transport.get(
            f"/repos/{owner}/{name}/rulesets",
            params={"per_page": 100},
        ) or []
        if not isinstance(summaries, list):
            raise ServerError("INVALID_RESPONSE", "expected a list of rulesets")

        rulesets = []
        for summary in summaries:
            if summary.get("target", "branch") != "branch":
                continue
            detail = self.transport.get(f"/repos/{owner}/{name}/rulesets/{summary['id']}")
            rulesets.append(_parse_ruleset(detail or summary))
        return rulesets
