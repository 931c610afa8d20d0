"""Markdown rendering and marker-delimited file updates."""

from .file_updater import (
    END_MARKER,
    START_MARKER,
    replace_marked_region,
    write_readme,
)
from .renderer import (
    FLAGS_BASE_URL,
    generate_markdown,
    generate_table_section,
    partition_languages,
)

__all__ = [
    "END_MARKER",
    "FLAGS_BASE_URL",
    "START_MARKER",
    "generate_markdown",
    "generate_table_section",
    "partition_languages",
    "replace_marked_region",
    "write_readme",
]
