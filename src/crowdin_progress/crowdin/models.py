"""Typed records deserialized from Crowdin API responses."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class LanguageProgress(BaseModel):
    """Translation progress of one target language of a Crowdin project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    language_id: str = Field(..., alias="languageId", min_length=1)
    translation_progress: Annotated[int, Field(ge=0, le=100)] = Field(
        ..., alias="translationProgress"
    )
