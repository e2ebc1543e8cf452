"""Custom exceptions for org-mode to Textile conversion."""

from typing import Any


class OrgTextileError(Exception):
    """Base exception for conversion operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class OrgLineError(OrgTextileError):
    """Raised when a classified line breaks its contract (e.g. a negative indent)."""


class OrgTextileConfigError(OrgTextileError):
    """Raised when converter settings cannot be loaded or are invalid."""
