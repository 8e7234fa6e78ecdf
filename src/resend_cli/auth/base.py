"""Prompt protocol and helpers shared by auth flows."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, Protocol, TypeVar

import msgspec

from resend_cli.errors import messages
from resend_cli.models import API_KEY_PREFIX, DEFAULT_KEY_NAME, SavedKey

T = TypeVar("T")

# Returns an error message, or None when the value is acceptable
Validator = Callable[[str], "str | None"]


class Ok(msgspec.Struct, Generic[T], frozen=True):
    """A prompt answered by the user."""

    value: T


class Cancelled(msgspec.Struct, frozen=True):
    """A prompt the user aborted (Ctrl+C, EOF)."""


CANCELLED = Cancelled()

PromptResult = Ok[T] | Cancelled


class Prompter(Protocol):
    """Interactive input used by auth flows."""

    def select(
        self, message: str, options: Sequence[tuple[str, str]]
    ) -> PromptResult[str]:
        """Pick one of ``(value, label)`` options."""
        ...

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
        hide_input: bool = False,
    ) -> PromptResult[str]:
        """Read a line of text, re-prompting until ``validate`` passes."""
        ...


def validate_api_key(value: str) -> str | None:
    if not value:
        return messages.API_KEY_REQUIRED
    if not value.startswith(API_KEY_PREFIX):
        return messages.API_KEY_PREFIX_REQUIRED
    return None


def validate_key_name(value: str) -> str | None:
    if not value.strip():
        return messages.KEY_NAME_REQUIRED
    return None


def mask_api_key(key: str) -> str:
    """Display form of a secret: short prefix and suffix only."""
    if len(key) <= 10:
        return f"{key[:4]}***"
    return f"{key[:6]}...{key[-4:]}"


def default_add_key_name(saved: Sequence[SavedKey]) -> str:
    """Suggested name for an additional key."""
    taken = {item.name for item in saved}
    if DEFAULT_KEY_NAME not in taken:
        return DEFAULT_KEY_NAME
    n = len(saved) + 1
    while f"key-{n}" in taken:
        n += 1
    return f"key-{n}"


def default_login_name(saved: Sequence[SavedKey], selected: str | None) -> str:
    """Name used when a login never resolved one."""
    if not saved:
        return DEFAULT_KEY_NAME
    return (selected or "").strip() or DEFAULT_KEY_NAME
