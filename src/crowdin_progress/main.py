"""
Main entry point for the Crowdin progress action.

This module sets up logging, builds the configuration and runs the pipeline:
validate the environment, fetch progress from Crowdin, render the markdown
tables and write them into the target file.
"""

import logging
import os
import sys
from collections.abc import Mapping

from .config.manager import ConfigManager
from .config.schema import ActionConfig
from .markdown.file_updater import write_readme
from .markdown.renderer import generate_markdown
from .progress.fetcher import fetch_languages_progress, languages_or_empty
from .utils.cli.args import parse_arguments
from .utils.core.exceptions import ProgressActionError
from .utils.core.workflow_log import WorkflowCommandFormatter, is_annotated


def setup_logging(verbose: bool = False, ci_mode: bool = False) -> None:
    """
    Configure console logging.

    Args:
        verbose: Enable debug logging
        ci_mode: Emit GitHub Actions workflow commands instead of timestamps
    """
    level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    if ci_mode:
        formatter: logging.Formatter = WorkflowCommandFormatter("%(message)s")
    elif verbose:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    # The runner only parses workflow commands from stdout
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(is_annotated)
    root_logger.addHandler(console_handler)

    # Non-fatal errors are written to stderr without an annotation
    error_handler = logging.StreamHandler(sys.stderr)
    error_handler.setLevel(level)
    error_handler.setFormatter(formatter)
    error_handler.addFilter(lambda record: not is_annotated(record))
    root_logger.addHandler(error_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def set_failed(message: str) -> None:
    """Report the run as failed with `message` as the visible reason."""
    logger.error(message)


async def run(config: ActionConfig) -> None:
    """
    Run the pipeline once with a validated configuration.

    A failed Crowdin request does not stop the run: the tables are rendered
    empty and the file is still updated.
    """
    result = await fetch_languages_progress(config.crowdin)
    languages = languages_or_empty(result)

    markdown = generate_markdown(
        languages,
        config.inputs.minimum_completion_percent,
        config.inputs.languages_per_row,
    )

    write_readme(config.inputs.file, markdown)
    logger.info("Done !")


async def main(
    args: list[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    """
    Parse arguments, load configuration and run the action.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])
        environ: Environment mapping; the process environment (plus an
            optional .env file) is used when None

    Returns:
        Process exit code: 0 on success, 1 on failure
    """
    parsed_args = parse_arguments(args)

    process_environ = os.environ if environ is None else environ
    ci_mode = process_environ.get("GITHUB_ACTIONS") == "true"
    setup_logging(verbose=parsed_args.verbose, ci_mode=ci_mode)

    config_manager = ConfigManager()
    try:
        config = config_manager.load(
            environ=environ,
            overrides=parsed_args.input_overrides(),
            env_file=parsed_args.env_file,
        )
        await run(config)
    except ProgressActionError as e:
        set_failed(e.user_message)
        return 1
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected error: %s", e)
        set_failed(str(e))
        return 1

    return 0
