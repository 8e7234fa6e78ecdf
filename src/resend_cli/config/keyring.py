"""Named API key management on top of the config store."""

from __future__ import annotations

import logging

from resend_cli.config.store import ConfigStore
from resend_cli.models import SavedKey

logger = logging.getLogger(__name__)


class Keyring:
    """Save, select, and remove named API keys.

    Keeps the selection invariant: ``selected_key_name`` is either unset or
    names an entry of the key map.
    """

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    @property
    def selected_key_name(self) -> str | None:
        return self.store.get("selected_key_name")

    def save_key(self, name: str, key: str) -> None:
        """Insert or overwrite the key stored under ``name``."""
        keys = self._keys_map()
        keys[name] = key
        self.store.set("keys", keys)
        logger.info("Saved key '%s'", name)

    def get_key(self, name: str) -> str | None:
        return self._keys_map().get(name)

    def list_keys(self) -> list[SavedKey]:
        """Return saved keys sorted by name."""
        return [
            SavedKey(name=name, key=key)
            for name, key in sorted(self._keys_map().items())
        ]

    def select_key(self, name: str) -> bool:
        """Make ``name`` the active key. Returns False if it is not saved."""
        if name not in self._keys_map():
            return False
        self.store.set("selected_key_name", name)
        logger.info("Selected key '%s'", name)
        return True

    def remove_key(self, name: str) -> bool:
        """Remove a saved key.

        If it was selected, the first remaining name (sorted) becomes
        selected, or the selection is cleared when none remain.
        Returns False if ``name`` is not saved.
        """
        keys = self._keys_map()
        if name not in keys:
            return False

        del keys[name]
        with self.store.batch():
            self.store.set("keys", keys)
            if self.selected_key_name == name:
                if keys:
                    self.store.set("selected_key_name", min(keys))
                else:
                    self.store.delete("selected_key_name")
        logger.info("Removed key '%s'", name)
        return True

    def clear_selection(self) -> None:
        """Forget the active key without touching the key map."""
        self.store.delete("selected_key_name")
        logger.info("Cleared key selection")

    def clear_saved_keys(self) -> None:
        """Remove every saved key, the selection, and the legacy key field."""
        with self.store.batch():
            self.store.set("keys", {})
            self.store.delete("selected_key_name")
            self.store.delete("api_key")
        logger.info("Cleared all saved keys")

    def _keys_map(self) -> dict[str, str]:
        return self.store.get("keys") or {}
