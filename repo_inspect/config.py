"""Invocation configuration built once from parsed command-line arguments."""

import argparse
from dataclasses import dataclass

from repo_inspect.render import normalize_format
from repo_inspect.sections import parse_sections


@dataclass(frozen=True)
class InspectConfig:
    """Everything one inspection run needs to know about its invocation."""

    repository: str | None = None
    output_format: str = "json"
    verbose: bool = False
    sections: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Fail on a bad format before any API call is made
        normalize_format(self.output_format)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "InspectConfig":
        """
        Build the configuration from parsed arguments.

        Raises:
            FormatError: If ``--format`` names an unsupported format
        """
        return cls(
            repository=args.repository,
            output_format=args.format,
            verbose=args.verbose,
            sections=parse_sections(args.sections),
        )
