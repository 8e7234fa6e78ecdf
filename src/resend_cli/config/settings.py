"""Miscellaneous settings kept alongside saved keys."""

from __future__ import annotations

from resend_cli.config.store import ConfigStore


class Settings:
    """Scalar settings stored in the same document as the keyring."""

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    @property
    def default_from(self) -> str | None:
        return self.store.get("default_from")

    @default_from.setter
    def default_from(self, value: str | None) -> None:
        if value is None:
            self.store.delete("default_from")
        else:
            self.store.set("default_from", value)

    @property
    def profile(self) -> str:
        return self.store.get("profile")

    @property
    def last_version_check_at(self) -> int | None:
        return self.store.get("last_version_check_at")

    @last_version_check_at.setter
    def last_version_check_at(self, value: int | None) -> None:
        if value is None:
            self.store.delete("last_version_check_at")
        else:
            self.store.set("last_version_check_at", value)
