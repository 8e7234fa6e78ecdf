"""Error handling for resend-cli."""

from resend_cli.errors.types import (
    ErrorCategory,
    KeyNotFoundError,
    NetworkError,
    NotAuthenticatedError,
    ResendCliError,
    StoreError,
    ValidationError,
)

__all__ = [
    "ErrorCategory",
    "ResendCliError",
    "ValidationError",
    "KeyNotFoundError",
    "NotAuthenticatedError",
    "NetworkError",
    "StoreError",
]
