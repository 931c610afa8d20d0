"""Test utilities package for the Crowdin progress action tests."""

from __future__ import annotations

from .test_helpers import (
    make_language,
    make_languages,
    make_progress_page,
    mock_crowdin_client,
    mock_response,
    preserved_root_logger,
)

__all__ = [
    "make_language",
    "make_languages",
    "make_progress_page",
    "mock_crowdin_client",
    "mock_response",
    "preserved_root_logger",
]
