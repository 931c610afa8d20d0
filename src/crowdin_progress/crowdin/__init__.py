"""Crowdin API integration."""

from .client import CrowdinClient
from .models import LanguageProgress

__all__ = ["CrowdinClient", "LanguageProgress"]
