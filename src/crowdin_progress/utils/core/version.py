"""
Version utilities for the Crowdin progress action.

Reads the installed distribution metadata and falls back to pyproject.toml
when running from a source checkout.
"""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "crowdin-translations-progress"
FALLBACK_VERSION = "0.0.0"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """
    Get the project version.

    Returns:
        Version string (e.g., "1.0.0")

    Raises:
        RuntimeError: If version cannot be determined from any source
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("importlib.metadata failed, falling back to pyproject.toml")

    return _read_version_from_pyproject()


def _read_version_from_pyproject() -> str:
    """Read version from the pyproject.toml next to the source tree."""
    pyproject_path = Path(__file__).resolve().parents[4] / "pyproject.toml"

    if not pyproject_path.exists():
        raise RuntimeError("pyproject.toml not found")

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise RuntimeError(f"Failed to read version from pyproject.toml: {e}") from e

    project_data = data.get("project")
    if not isinstance(project_data, dict):
        raise RuntimeError("project section not found or invalid")

    project_version = project_data.get("version")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    if not isinstance(project_version, str):
        raise RuntimeError("version field not found or not a string")

    return project_version


def get_version() -> str:
    """Get the project version with error handling."""
    try:
        return get_project_version()
    except RuntimeError:
        logger.warning("Could not determine project version, using fallback")
        return FALLBACK_VERSION
