"""
Basic exception classes for the Crowdin progress action.

This module contains the exception hierarchy shared by every pipeline stage
without creating import cycles.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    API = "api"
    CONFIGURATION = "configuration"
    FILESYSTEM = "filesystem"
    UNKNOWN = "unknown"


class ProgressActionError(Exception):
    """Base exception class for Crowdin progress action errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.user_message: str = user_message or message
        self.context: object | None = context
        self.recoverable: bool = recoverable


class ConfigurationError(ProgressActionError):
    """A required environment variable or action input is missing or invalid."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            recoverable=False,
            user_message=user_message,
            context=context,
        )


class FetchError(ProgressActionError):
    """Crowdin API errors (transport failures, HTTP errors, bad payloads)."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.API,
            severity=ErrorSeverity.MEDIUM,
            user_message=user_message,
            context=context,
            recoverable=recoverable,
        )


class MissingFileError(ProgressActionError):
    """The target file does not exist."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILESYSTEM,
            severity=ErrorSeverity.HIGH,
            recoverable=False,
            user_message=user_message,
            context=context,
        )


class WriteError(ProgressActionError):
    """Reading or rewriting the target file failed."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILESYSTEM,
            severity=ErrorSeverity.CRITICAL,
            recoverable=False,
            user_message=user_message,
            context=context,
        )
