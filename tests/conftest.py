"""
Global test configuration fixtures for the Crowdin progress action tests.

Provides validated configuration objects, environment mappings and a target
file containing the progress markers.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.crowdin_progress.config.schema import (
    ActionConfig,
    ActionInputs,
    CrowdinConfig,
)
from src.crowdin_progress.crowdin.models import LanguageProgress
from src.crowdin_progress.markdown.file_updater import END_MARKER, START_MARKER
from tests.utils.test_helpers import make_languages


@pytest.fixture
def base_environ() -> dict[str, str]:
    """Environment with every required Crowdin variable set."""
    return {
        "CROWDIN_PERSONAL_TOKEN": "test-token",
        "CROWDIN_PROJECT_ID": "123456",
        "CROWDIN_BASE_URL": "https://api.crowdin.com/api/v2",
    }


@pytest.fixture
def crowdin_config() -> CrowdinConfig:
    """Crowdin connection settings used by fetcher tests."""
    return CrowdinConfig(
        token="test-token",
        project_id=123456,
        base_url="https://api.crowdin.com/api/v2",
    )


@pytest.fixture
def readme_text() -> str:
    """README content with an outdated progress region."""
    return (
        "# My project\n"
        "\n"
        "## Translations\n"
        f"{START_MARKER}\n"
        "outdated table\n"
        f"{END_MARKER}\n"
        "\n"
        "## License\n"
        "MIT\n"
    )


@pytest.fixture
def readme_file(tmp_path: Path, readme_text: str) -> Path:
    """README file in a temporary directory."""
    path = tmp_path / "README.md"
    _ = path.write_text(readme_text, encoding="utf-8")
    return path


@pytest.fixture
def action_config(crowdin_config: CrowdinConfig, readme_file: Path) -> ActionConfig:
    """Complete configuration pointing at the temporary README."""
    return ActionConfig(
        crowdin=crowdin_config,
        inputs=ActionInputs(
            minimum_completion_percent=80,
            languages_per_row=2,
            file=readme_file,
        ),
    )


@pytest.fixture
def sample_languages() -> list[LanguageProgress]:
    """Languages sorted by descending progress, straddling an 80% threshold."""
    return make_languages(("fr", 95), ("de", 80), ("es", 50))
