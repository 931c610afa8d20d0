"""Command-line interface helpers."""
