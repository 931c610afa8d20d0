"""Configuration manager for the Crowdin progress action.

This module builds the immutable ActionConfig from the process environment
(optionally primed from a .env file) and the workflow inputs, so that no other
component reads ambient environment state.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import ActionConfig, ActionInputs, CrowdinConfig


logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported.
REQUIRED_ENVIRONMENT_VARIABLES: dict[str, str] = {
    "CROWDIN_PERSONAL_TOKEN": "token",
    "CROWDIN_PROJECT_ID": "project_id",
    "CROWDIN_BASE_URL": "base_url",
}

# GitHub Actions exposes `with:` inputs as INPUT_<NAME> variables.
ACTION_INPUTS: dict[str, str] = {
    "INPUT_MINIMUM_COMPLETION_PERCENT": "minimum_completion_percent",
    "INPUT_LANGUAGES_PER_ROW": "languages_per_row",
    "INPUT_FILE": "file",
}


class ConfigManager:
    """
    Builds the configuration for a single run.

    The configuration is validated with Pydantic and then handed to each
    pipeline stage explicitly.
    """

    @staticmethod
    def check_environment_variables(environ: Mapping[str, str]) -> None:
        """
        Ensure every required Crowdin variable is present and non-empty.

        Args:
            environ: Environment mapping to inspect

        Raises:
            ConfigurationError: Naming the first missing variable
        """
        logger.info("Checking environment variables...")

        for name in REQUIRED_ENVIRONMENT_VARIABLES:
            if not environ.get(name):
                raise ConfigurationError(
                    f"Missing environment variable: {name}",
                    context={"variable": name},
                )

    @staticmethod
    def load_from_environment(
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, object | None] | None = None,
        env_file: Path | None = None,
    ) -> ActionConfig:
        """
        Load and validate configuration from environment variables.

        Args:
            environ: Environment mapping; defaults to os.environ after loading
                the optional .env file
            overrides: Input values that take precedence over INPUT_* variables
                (None values are ignored)
            env_file: Optional .env file path; the default lookup is used when None

        Returns:
            ActionConfig: Validated configuration object

        Raises:
            ConfigurationError: If a required variable is missing or a value
                fails validation
        """
        if environ is None:
            _ = load_dotenv(
                dotenv_path=env_file or find_dotenv(usecwd=True), override=False
            )
            environ = os.environ

        ConfigManager.check_environment_variables(environ)

        crowdin_data = {
            field: environ[name]
            for name, field in REQUIRED_ENVIRONMENT_VARIABLES.items()
        }
        try:
            crowdin = CrowdinConfig.model_validate(crowdin_data)
        except ValidationError as e:
            raise ConfigManager._to_configuration_error(
                e, REQUIRED_ENVIRONMENT_VARIABLES, "environment variable"
            ) from e

        inputs_data = ConfigManager._parse_inputs(environ, overrides or {})
        try:
            inputs = ActionInputs.model_validate(inputs_data)
        except ValidationError as e:
            raise ConfigManager._to_configuration_error(
                e, ACTION_INPUTS, "input"
            ) from e

        return ActionConfig(crowdin=crowdin, inputs=inputs)

    @staticmethod
    def _parse_inputs(
        environ: Mapping[str, str], overrides: Mapping[str, object | None]
    ) -> dict[str, object]:
        """
        Collect workflow inputs, dropping empty values so defaults apply.

        Args:
            environ: Environment mapping holding INPUT_* variables
            overrides: Values passed explicitly (e.g., from the command line)

        Returns:
            dict[str, object]: Raw input data for ActionInputs
        """
        parsed: dict[str, object] = {}

        for name, field in ACTION_INPUTS.items():
            raw = environ.get(name, "").strip()
            if raw:
                parsed[field] = raw

        for field, value in overrides.items():
            match value:
                case None:
                    continue
                case str() if not value.strip():
                    continue
                case _:
                    parsed[field] = value

        return parsed

    @staticmethod
    def _to_configuration_error(
        error: ValidationError, names: Mapping[str, str], kind: str
    ) -> ConfigurationError:
        """Translate the first Pydantic error into a ConfigurationError."""
        first = error.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else ""
        by_field = {value: key for key, value in names.items()}
        name = by_field.get(field, field)
        return ConfigurationError(
            f"Invalid {kind} {name}: {first['msg']}",
            context={"variable": name},
        )

    def load(
        self,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, object | None] | None = None,
        env_file: Path | None = None,
    ) -> ActionConfig:
        """Load and validate the configuration for this run."""
        return self.load_from_environment(
            environ=environ, overrides=overrides, env_file=env_file
        )
