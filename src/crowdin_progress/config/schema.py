"""Configuration schema for the Crowdin progress action using Pydantic models."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrowdinConfig(BaseModel):
    """Crowdin service configuration, read from the environment."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        description="Crowdin personal access token",
        min_length=1,
    )
    project_id: int = Field(
        ...,
        description="Numeric Crowdin project identifier",
        gt=0,
    )
    base_url: str = Field(
        ...,
        description="Crowdin API base URL (e.g., https://api.crowdin.com/api/v2)",
        min_length=1,
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate and normalize the Crowdin API URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Crowdin base URL must start with http:// or https://")
        return v.rstrip("/")


class ActionInputs(BaseModel):
    """Inputs supplied by the workflow host."""

    model_config = ConfigDict(frozen=True)

    minimum_completion_percent: Annotated[float, Field(ge=0, le=100)] = Field(
        default=80,
        description="Languages at or above this completion are listed as available",
    )
    languages_per_row: Annotated[int, Field(gt=0)] = Field(
        default=8,
        description="Maximum number of languages rendered in one table row",
    )
    file: Path = Field(
        default=Path("README.md"),
        description="File containing the progress markers",
    )


class ActionConfig(BaseModel):
    """Complete configuration for one run, built once at startup."""

    model_config = ConfigDict(frozen=True)

    crowdin: CrowdinConfig
    inputs: ActionInputs = Field(default_factory=ActionInputs)
