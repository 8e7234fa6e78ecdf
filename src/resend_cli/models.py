"""Data models for resend-cli.

Defines the persisted config document and the records exchanged between the
credential store, the resolver, and the auth workflow.
"""

from __future__ import annotations

from enum import StrEnum

import msgspec

DEFAULT_PROFILE = "default"
DEFAULT_KEY_NAME = "default"
API_KEY_PREFIX = "re_"


class ConfigSchema(msgspec.Struct, omit_defaults=True, rename="camel"):
    """On-disk config document.

    Serialized with camelCase keys (``selectedKeyName``, ``apiKey``, ...).
    Every field is optional; unknown keys in the file are ignored.
    """

    keys: dict[str, str] | None = None
    selected_key_name: str | None = None
    api_key: str | None = None  # Legacy single-key field
    default_from: str | None = None
    profile: str = DEFAULT_PROFILE
    last_version_check_at: int | None = None  # Epoch milliseconds


CONFIG_FIELDS: tuple[str, ...] = ConfigSchema.__struct_fields__


class SavedKey(msgspec.Struct, frozen=True):
    """A named API key."""

    name: str
    key: str


class KeySource(StrEnum):
    """Where the effective API key came from."""

    ENVIRONMENT = "environment"
    SAVED = "saved"


class ResolvedKey(msgspec.Struct, frozen=True):
    """The API key a process invocation will use."""

    key: str
    source: KeySource
    name: str | None = None  # Saved key name, when source is SAVED


class LoginAction(StrEnum):
    """Choices offered when logging in with keys already saved."""

    USE = "use"
    ADD = "add"
    REPLACE = "replace"

    @property
    def label(self) -> str:
        match self:
            case LoginAction.USE:
                return "Use existing key"
            case LoginAction.ADD:
                return "Add new key"
            case LoginAction.REPLACE:
                return "Replace active key"


class LoginStatus(StrEnum):
    SAVED = "saved"
    SELECTED = "selected"
    ALREADY_ACTIVE = "already_active"
    CANCELLED = "cancelled"


class LoginOutcome(msgspec.Struct, frozen=True):
    """Result of a login flow."""

    status: LoginStatus
    name: str | None = None
    key: str | None = None


class LogoutStatus(StrEnum):
    REMOVED = "removed"
    REMOVED_ACTIVE = "removed_active"
    REMOVED_ALL = "removed_all"
    ENVIRONMENT_ONLY = "environment_only"


class LogoutOutcome(msgspec.Struct, frozen=True):
    """Result of a logout."""

    status: LogoutStatus
    name: str | None = None
    selected: str | None = None  # Selection after the removal


class KeyListing(msgspec.Struct, frozen=True):
    """Saved keys plus selection and environment override state."""

    keys: list[SavedKey]
    selected: str | None = None
    env_key: str | None = None

    @property
    def env_override(self) -> bool:
        return self.env_key is not None
