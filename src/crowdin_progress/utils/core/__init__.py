"""Core utilities: exceptions and version information."""

from .exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    FetchError,
    MissingFileError,
    ProgressActionError,
    WriteError,
)

__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "FetchError",
    "MissingFileError",
    "ProgressActionError",
    "WriteError",
]
