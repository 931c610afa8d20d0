"""
Progress fetcher stage.

Retrieves every language's progress from Crowdin, logs each entry and returns
the languages sorted by completion. Failures are returned as data rather than
raised so that the caller decides how to degrade.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ..config.schema import CrowdinConfig
from ..crowdin.client import CrowdinClient
from ..crowdin.models import LanguageProgress
from ..utils.core.workflow_log import PLAIN_ERROR

logger = logging.getLogger(__name__)


class FetchResult(NamedTuple):
    """Outcome of the fetch stage: the languages, or the error that stopped it."""

    languages: tuple[LanguageProgress, ...]
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True when the languages were retrieved."""
        return self.error is None


def sort_by_progress(
    languages: list[LanguageProgress],
) -> tuple[LanguageProgress, ...]:
    """Sort languages by translation progress, most complete first."""
    return tuple(
        sorted(
            languages,
            key=lambda language: language.translation_progress,
            reverse=True,
        )
    )


async def fetch_languages_progress(config: CrowdinConfig) -> FetchResult:
    """
    Fetch the translation progress of every language of the project.

    Args:
        config: Crowdin connection settings

    Returns:
        FetchResult with languages sorted by descending progress, or with the
        error that interrupted the request
    """
    logger.info("Retrieving translations progress from Crowdin...")

    try:
        async with CrowdinClient(config.base_url, config.token) as client:
            languages = await client.get_project_progress(
                config.project_id, fetch_all=True
            )
    except Exception as e:  # noqa: BLE001
        return FetchResult(languages=(), error=e)

    for language in languages:
        logger.info(
            "%s progress is %d", language.language_id, language.translation_progress
        )

    return FetchResult(languages=sort_by_progress(languages))


def languages_or_empty(result: FetchResult) -> tuple[LanguageProgress, ...]:
    """
    Degrade a failed fetch to an empty language list.

    The failure is written to the error channel without a workflow annotation
    and the run carries on, so the rendered tables end up empty instead of
    the action failing.
    """
    if result.error is None:
        return result.languages

    logger.error("translationStatusApi : ", extra=PLAIN_ERROR)
    logger.error("%s", result.error, exc_info=result.error, extra=PLAIN_ERROR)
    return ()
