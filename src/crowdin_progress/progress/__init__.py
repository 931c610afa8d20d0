"""Retrieval of per-language translation progress."""

from .fetcher import FetchResult, fetch_languages_progress, languages_or_empty

__all__ = ["FetchResult", "fetch_languages_progress", "languages_or_empty"]
