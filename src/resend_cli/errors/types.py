"""Error types and classifications."""

from __future__ import annotations

from enum import StrEnum


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AUTHENTICATION = "authentication"
    NETWORK = "network"
    CANCELLED = "cancelled"
    UNEXPECTED = "unexpected"


class ResendCliError(Exception):
    """Base class for errors reported to the user as a single line."""

    category: ErrorCategory = ErrorCategory.UNEXPECTED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to dict for JSON error output."""
        return {"message": self.message, "category": self.category.value}


class ValidationError(ResendCliError):
    """Malformed user input, e.g. an API key without the ``re_`` prefix."""

    category = ErrorCategory.VALIDATION


class KeyNotFoundError(ResendCliError):
    """A saved key name that does not exist."""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, name: str | None = None, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"No saved key found with name '{name}'.")


class NotAuthenticatedError(ResendCliError):
    category = ErrorCategory.AUTHENTICATION


class NetworkError(ResendCliError):
    category = ErrorCategory.NETWORK


class StoreError(ResendCliError):
    """The config file could not be read or written."""

    category = ErrorCategory.UNEXPECTED
