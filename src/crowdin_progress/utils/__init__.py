"""Shared utilities for the Crowdin progress action."""
