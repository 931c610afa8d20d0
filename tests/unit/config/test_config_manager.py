"""Tests for the configuration manager."""

from pathlib import Path

import pytest

from src.crowdin_progress.config.manager import ConfigManager
from src.crowdin_progress.config.schema import ActionConfig
from src.crowdin_progress.utils.core.exceptions import (
    ConfigurationError,
    ErrorCategory,
)


class TestCheckEnvironmentVariables:
    """Test cases for the required environment variable check."""

    def test_all_present(self, base_environ: dict[str, str]) -> None:
        """Test that a complete environment passes."""
        ConfigManager.check_environment_variables(base_environ)

    @pytest.mark.parametrize(
        "missing",
        ["CROWDIN_PERSONAL_TOKEN", "CROWDIN_PROJECT_ID", "CROWDIN_BASE_URL"],
    )
    def test_missing_variable_named(
        self, base_environ: dict[str, str], missing: str
    ) -> None:
        """Test that the missing variable is named in the error."""
        del base_environ[missing]

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager.check_environment_variables(base_environ)

        assert str(exc_info.value) == f"Missing environment variable: {missing}"
        assert exc_info.value.category == ErrorCategory.CONFIGURATION
        assert exc_info.value.recoverable is False

    def test_empty_variable_counts_as_missing(
        self, base_environ: dict[str, str]
    ) -> None:
        """Test that an empty value is reported like a missing one."""
        base_environ["CROWDIN_PROJECT_ID"] = ""

        with pytest.raises(
            ConfigurationError, match="Missing environment variable: CROWDIN_PROJECT_ID"
        ):
            ConfigManager.check_environment_variables(base_environ)

    def test_first_missing_reported(self) -> None:
        """Test that only the first missing variable is reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager.check_environment_variables({})

        assert "CROWDIN_PERSONAL_TOKEN" in str(exc_info.value)
        assert "CROWDIN_PROJECT_ID" not in str(exc_info.value)

    def test_logs_check_start(
        self, base_environ: dict[str, str], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that the check is announced in the logs."""
        with caplog.at_level("INFO"):
            ConfigManager.check_environment_variables(base_environ)

        assert "Checking environment variables..." in caplog.text


class TestLoadFromEnvironment:
    """Test cases for building the configuration."""

    def test_load_defaults(self, base_environ: dict[str, str]) -> None:
        """Test loading with only the required variables."""
        config = ConfigManager.load_from_environment(base_environ)

        assert isinstance(config, ActionConfig)
        assert config.crowdin.token == "test-token"
        assert config.crowdin.project_id == 123456
        assert config.crowdin.base_url == "https://api.crowdin.com/api/v2"
        assert config.inputs.minimum_completion_percent == 80
        assert config.inputs.languages_per_row == 8
        assert config.inputs.file == Path("README.md")

    def test_action_inputs_from_environment(
        self, base_environ: dict[str, str]
    ) -> None:
        """Test that GitHub Actions INPUT_* variables are used."""
        base_environ.update(
            {
                "INPUT_MINIMUM_COMPLETION_PERCENT": "60",
                "INPUT_LANGUAGES_PER_ROW": "4",
                "INPUT_FILE": "docs/index.md",
            }
        )

        config = ConfigManager.load_from_environment(base_environ)

        assert config.inputs.minimum_completion_percent == 60
        assert config.inputs.languages_per_row == 4
        assert config.inputs.file == Path("docs/index.md")

    def test_empty_inputs_use_defaults(self, base_environ: dict[str, str]) -> None:
        """Test that blank INPUT_* variables fall back to defaults."""
        base_environ["INPUT_LANGUAGES_PER_ROW"] = "  "

        config = ConfigManager.load_from_environment(base_environ)

        assert config.inputs.languages_per_row == 8

    def test_overrides_take_precedence(self, base_environ: dict[str, str]) -> None:
        """Test that explicit overrides win over INPUT_* variables."""
        base_environ["INPUT_LANGUAGES_PER_ROW"] = "4"

        config = ConfigManager.load_from_environment(
            base_environ,
            overrides={"languages_per_row": "6", "file": None},
        )

        assert config.inputs.languages_per_row == 6
        assert config.inputs.file == Path("README.md")

    def test_missing_variable_raises(self, base_environ: dict[str, str]) -> None:
        """Test that a missing variable aborts loading."""
        del base_environ["CROWDIN_BASE_URL"]

        with pytest.raises(
            ConfigurationError, match="Missing environment variable: CROWDIN_BASE_URL"
        ):
            _ = ConfigManager.load_from_environment(base_environ)

    def test_invalid_project_id_named(self, base_environ: dict[str, str]) -> None:
        """Test that validation errors name the offending variable."""
        base_environ["CROWDIN_PROJECT_ID"] = "my-project"

        with pytest.raises(ConfigurationError) as exc_info:
            _ = ConfigManager.load_from_environment(base_environ)

        assert "CROWDIN_PROJECT_ID" in str(exc_info.value)

    def test_invalid_input_named(self, base_environ: dict[str, str]) -> None:
        """Test that invalid workflow inputs name the INPUT_* variable."""
        base_environ["INPUT_MINIMUM_COMPLETION_PERCENT"] = "150"

        with pytest.raises(ConfigurationError) as exc_info:
            _ = ConfigManager.load_from_environment(base_environ)

        assert "INPUT_MINIMUM_COMPLETION_PERCENT" in str(exc_info.value)

    def test_env_file_loaded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that variables are read from a .env file when no mapping is given."""
        for name in (
            "CROWDIN_PERSONAL_TOKEN",
            "CROWDIN_PROJECT_ID",
            "CROWDIN_BASE_URL",
            "INPUT_MINIMUM_COMPLETION_PERCENT",
            "INPUT_LANGUAGES_PER_ROW",
            "INPUT_FILE",
        ):
            # setenv first so teardown also removes what the .env file adds
            monkeypatch.setenv(name, "placeholder")
            monkeypatch.delenv(name)

        env_file = tmp_path / ".env"
        _ = env_file.write_text(
            "CROWDIN_PERSONAL_TOKEN=from-dotenv\n"
            "CROWDIN_PROJECT_ID=7\n"
            "CROWDIN_BASE_URL=https://api.crowdin.com/api/v2\n",
            encoding="utf-8",
        )

        config = ConfigManager.load_from_environment(env_file=env_file)

        assert config.crowdin.token == "from-dotenv"
        assert config.crowdin.project_id == 7


class TestConfigManagerLoad:
    """Test cases for ConfigManager.load."""

    def test_load_returns_validated_config(
        self, base_environ: dict[str, str]
    ) -> None:
        """Test that load builds the same config as the environment loader."""
        config = ConfigManager().load(
            environ=base_environ, overrides={"languages_per_row": "3"}
        )

        assert config.crowdin.project_id == 123456
        assert config.inputs.languages_per_row == 3
        assert config == ConfigManager.load_from_environment(
            environ=base_environ, overrides={"languages_per_row": "3"}
        )
