"""
Markdown renderer stage.

Splits languages into "Available" and "In progress" buckets around the
completion threshold and renders each bucket as an HTML table of flags.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..crowdin.models import LanguageProgress

logger = logging.getLogger(__name__)

FLAGS_BASE_URL = (
    "https://raw.githubusercontent.com/benjaminjonard/"
    "crowdin-translations-progress-action/1.0/flags/"
)

AVAILABLE_TITLE = "Available"
IN_PROGRESS_TITLE = "In progress"


def partition_languages(
    languages: Sequence[LanguageProgress] | None, threshold: float
) -> tuple[list[LanguageProgress], list[LanguageProgress]]:
    """
    Split languages on the completion threshold, keeping input order.

    Args:
        languages: Languages to split; None is treated as empty
        threshold: Minimum completion percent for the available bucket

    Returns:
        Tuple of (available, in_progress)
    """
    available: list[LanguageProgress] = []
    in_progress: list[LanguageProgress] = []

    for language in languages or ():
        if language.translation_progress >= threshold:
            available.append(language)
        else:
            in_progress.append(language)

    return available, in_progress


def render_cell(language: LanguageProgress) -> str:
    """Render the flag and percentage cell of one language."""
    return (
        '<td align="center" valign="top">'
        f'<img width="30px" height="30px" src="{FLAGS_BASE_URL}{language.language_id}.png">'
        '</div><div align="center" valign="top">'
        f"{language.translation_progress}%</td>"
    )


def generate_table_section(
    languages: Sequence[LanguageProgress] | None,
    title: str,
    languages_per_row: int,
) -> str:
    """
    Render one titled table section.

    A row is opened before the first cell and after every full row, and closed
    only when it is full, so a trailing partial row has no closing tag.

    Args:
        languages: Languages of the section
        title: Section heading
        languages_per_row: Maximum number of cells per row

    Returns:
        The section markdown, or an empty string when there are no languages
    """
    if not languages:
        return ""

    row_width = min(languages_per_row, len(languages))

    parts: list[str] = ["\n\n", f"#### {title}", "\n\n", "<table>"]

    for index, language in enumerate(languages, start=1):
        if (index - 1) % row_width == 0:
            parts.append("<tr>")

        parts.append(render_cell(language))

        if index % row_width == 0:
            parts.append("</tr>")

    parts.append("</table>")

    return "".join(parts)


def generate_markdown(
    languages: Sequence[LanguageProgress] | None,
    minimum_completion_percent: float,
    languages_per_row: int,
) -> str:
    """
    Render the available and in-progress sections, in that order.

    Args:
        languages: Languages sorted by descending progress
        minimum_completion_percent: Threshold separating the two sections
        languages_per_row: Maximum number of cells per table row

    Returns:
        Concatenated markdown of both sections
    """
    logger.info("Generate Markdown table...")

    available, in_progress = partition_languages(
        languages, minimum_completion_percent
    )

    markdown = generate_table_section(available, AVAILABLE_TITLE, languages_per_row)
    markdown += generate_table_section(
        in_progress, IN_PROGRESS_TITLE, languages_per_row
    )

    return markdown
