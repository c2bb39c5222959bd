"""Command-line entry point: ``repo-inspect [owner/repo]``."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from repo_inspect.client import GitHubClient
from repo_inspect.collect import collect
from repo_inspect.config import InspectConfig
from repo_inspect.exceptions import RepoInspectError
from repo_inspect.git import current_repository, parse_repository
from repo_inspect.logging import configure_logging
from repo_inspect.render import render
from repo_inspect.sections import SECTIONS

DESCRIPTION = """\
Read-only discovery of repository governance configuration.

Inspects repository rulesets and branch protection, required status checks,
collaborators and teams, security settings, repository configuration, and
issue labels and milestones. Nothing is ever modified."""


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors like every other fatal error: ``Error:`` and exit 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="repo-inspect",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "repository",
        nargs="?",
        metavar="owner/repo",
        help="repository to inspect (default: the current git repository)",
    )
    parser.add_argument(
        "-f",
        "--format",
        default="json",
        help="output format: json, yaml, yml or table (default: json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print diagnostics to stderr",
    )
    parser.add_argument(
        "-s",
        "--sections",
        action="append",
        metavar="SECTION[,SECTION...]",
        help=f"only inspect these sections ({', '.join(SECTIONS)}); repeatable",
    )
    return parser


def _configure_diagnostics(verbose: bool) -> None:
    configure_logging(
        level=logging.INFO if verbose else logging.ERROR,
        http_level=logging.DEBUG if verbose else None,
        handler=logging.StreamHandler(sys.stderr),
        format_string="%(levelname)s: %(message)s",
    )


def run(
    config: InspectConfig,
    client_factory: Callable[[], GitHubClient] = GitHubClient.from_env,
    stream: TextIO | None = None,
) -> int:
    """
    Resolve the repository, collect its governance and render it.

    The repository argument is validated before the client is created, so a
    malformed argument never reaches the API.

    Raises:
        RepoInspectError: On any fatal error
    """
    if config.repository:
        identity = parse_repository(config.repository)
    else:
        identity = current_repository()

    with client_factory() as client:
        record = collect(client, identity.owner, identity.name, config.sections)

    render(record, config.output_format, config.sections, stream=stream)
    return 0


def main(
    argv: Sequence[str] | None = None,
    client_factory: Callable[[], GitHubClient] = GitHubClient.from_env,
) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = InspectConfig.from_args(args)
        _configure_diagnostics(config.verbose)
        return run(config, client_factory)
    except RepoInspectError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
