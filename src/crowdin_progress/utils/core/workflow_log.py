"""
GitHub Actions log formatting.

Warnings and errors become workflow commands so that the runner shows them
as annotations. Records marked with PLAIN_ERROR bypass the annotation and are
written as ordinary error output.
"""

import logging
from typing_extensions import override

# Records logged with this extra go to stderr as plain text, never as an
# annotation, so a degraded run is not marked as failed.
PLAIN_ERROR = {"annotate": False}


def is_annotated(record: logging.LogRecord) -> bool:
    """True unless the record was logged with PLAIN_ERROR."""
    return bool(getattr(record, "annotate", True))


def escape_command_value(value: str) -> str:
    """Escape a workflow command value the way @actions/core does."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Render warnings and errors as GitHub Actions workflow commands."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not is_annotated(record):
            return message
        if record.levelno >= logging.ERROR:
            return f"::error::{escape_command_value(message)}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{escape_command_value(message)}"
        if record.levelno < logging.INFO:
            return f"::debug::{escape_command_value(message)}"
        return message
