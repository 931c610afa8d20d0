"""
Command-line argument parsing for the Crowdin progress action.

Arguments override the workflow inputs (INPUT_* variables) so the action can
also be run by hand or from other CI systems.
"""

import argparse
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    file: str | None
    minimum_completion_percent: str | None
    languages_per_row: str | None
    env_file: Path | None
    verbose: bool

    def input_overrides(self) -> dict[str, object | None]:
        """Workflow input values given on the command line."""
        return {
            "file": self.file,
            "minimum_completion_percent": self.minimum_completion_percent,
            "languages_per_row": self.languages_per_row,
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="crowdin-progress",
        description=(
            "Write Crowdin translation progress tables between the "
            "CROWDIN-TRANSLATIONS-PROGRESS-ACTION markers of a file"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Required environment variables:
  CROWDIN_PERSONAL_TOKEN, CROWDIN_PROJECT_ID, CROWDIN_BASE_URL

Examples:
  crowdin-progress
    Use the INPUT_* variables provided by GitHub Actions, or the defaults

  crowdin-progress --file docs/README.md --minimum-completion-percent 90
    Update another file with a stricter threshold
""",
    )

    _ = parser.add_argument(
        "--file",
        default=None,
        help="File containing the progress markers (default: README.md)",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--minimum-completion-percent",
        default=None,
        help="Completion needed to list a language as available (default: 80)",
        metavar="PERCENT",
    )
    _ = parser.add_argument(
        "--languages-per-row",
        default=None,
        help="Maximum number of languages per table row (default: 8)",
        metavar="COUNT",
    )
    _ = parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs with the raw option values; validation happens when the
        configuration is built

    Raises:
        SystemExit: If argument parsing fails or --help is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    file: str | None = getattr(parsed, "file", None)
    minimum_completion_percent: str | None = getattr(
        parsed, "minimum_completion_percent", None
    )
    languages_per_row: str | None = getattr(parsed, "languages_per_row", None)
    env_file: Path | None = getattr(parsed, "env_file", None)
    verbose: bool = bool(getattr(parsed, "verbose", False))

    return ParsedArgs(
        file=file,
        minimum_completion_percent=minimum_completion_percent,
        languages_per_row=languages_per_row,
        env_file=env_file,
        verbose=verbose,
    )
