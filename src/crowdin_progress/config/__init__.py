"""Configuration loading and validation for the Crowdin progress action."""
