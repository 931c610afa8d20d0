"""
File updater stage.

Replaces the region between the action's start and end markers in the target
file with freshly rendered markdown. Text outside the region is kept as is.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.core.exceptions import MissingFileError, WriteError

logger = logging.getLogger(__name__)

START_MARKER = "<!-- CROWDIN-TRANSLATIONS-PROGRESS-ACTION-START -->"
END_MARKER = "<!-- CROWDIN-TRANSLATIONS-PROGRESS-ACTION-END -->"


def wrap_in_markers(markdown: str) -> str:
    """Surround the rendered markdown with the start and end marker lines."""
    return f"{START_MARKER}\n{markdown}\n{END_MARKER}"


def find_marked_region(text: str) -> tuple[int, int] | None:
    """
    Locate the marked region.

    The region runs from the first start marker to the last end marker that
    follows it, so several marker pairs collapse into one region.

    Returns:
        (start, end) offsets with `end` just past the end marker, or None when
        the text has no start marker followed by an end marker
    """
    start = text.find(START_MARKER)
    if start == -1:
        return None

    end = text.rfind(END_MARKER)
    if end < start + len(START_MARKER):
        return None

    return start, end + len(END_MARKER)


def replace_marked_region(text: str, block: str) -> str:
    """
    Replace the marked region of `text` with `block`.

    Text without a complete region is returned unchanged; the markers are
    never inserted.
    """
    region = find_marked_region(text)
    if region is None:
        return text

    start, end = region
    return text[:start] + block + text[end:]


def write_readme(file: Path, markdown: str) -> None:
    """
    Write the rendered markdown between the markers of `file`.

    The file is always rewritten, even when its content does not change.

    Args:
        file: Target file, which must already exist
        markdown: Rendered progress tables

    Raises:
        MissingFileError: If the file does not exist; nothing is written
        WriteError: If reading or writing the file fails
    """
    if not file.exists():
        raise MissingFileError(
            f"The file {file} doesn't exists", context={"file": str(file)}
        )

    logger.info("Writing to file %s with content %s", file, markdown)

    try:
        # newline="" keeps the file's own line endings intact
        with file.open("r", encoding="utf-8", newline="") as f:
            contents = f.read()

        if find_marked_region(contents) is None:
            logger.warning(
                "No %s ... %s region found in %s, file left unchanged",
                START_MARKER,
                END_MARKER,
                file,
            )

        contents = replace_marked_region(contents, wrap_in_markers(markdown))

        with file.open("w", encoding="utf-8", newline="") as f:
            _ = f.write(contents)
    except OSError as e:
        raise WriteError(
            f"Failed to update {file}: {e}", context={"file": str(file)}
        ) from e
