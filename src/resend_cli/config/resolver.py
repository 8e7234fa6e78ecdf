"""Effective API key resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping

from resend_cli.config.keyring import Keyring
from resend_cli.models import DEFAULT_KEY_NAME
from resend_cli.models import KeySource
from resend_cli.models import ResolvedKey

API_KEY_ENV = "RESEND_API_KEY"


class CredentialResolver:
    """Compute the API key for this invocation.

    Precedence:
    1. RESEND_API_KEY, if set and non-empty
    2. The selected saved key, if it still exists
    3. The legacy ``apiKey`` field
    """

    def __init__(
        self,
        keyring: Keyring,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.keyring = keyring
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    @property
    def env_api_key(self) -> str | None:
        return self.environ.get(API_KEY_ENV) or None

    def resolve(self) -> ResolvedKey | None:
        if env_key := self.env_api_key:
            return ResolvedKey(key=env_key, source=KeySource.ENVIRONMENT)

        selected = self.keyring.selected_key_name
        if selected:
            if key := self.keyring.get_key(selected):
                return ResolvedKey(key=key, source=KeySource.SAVED, name=selected)

        # The legacy field is stored config too, so it reports as saved
        if legacy := self.keyring.store.get("api_key"):
            return ResolvedKey(key=legacy, source=KeySource.SAVED)

        return None

    def effective_api_key(self) -> str | None:
        resolved = self.resolve()
        return resolved.key if resolved else None

    def set_legacy_api_key(self, value: str | None) -> None:
        """Assign the single-key field.

        A value is saved as the ``default`` key, selected, and mirrored into
        ``apiKey`` for older readers. An empty value removes both.
        """
        store = self.keyring.store
        with store.batch():
            if not value:
                self.keyring.remove_key(DEFAULT_KEY_NAME)
                store.delete("api_key")
                return
            self.keyring.save_key(DEFAULT_KEY_NAME, value)
            self.keyring.select_key(DEFAULT_KEY_NAME)
            store.set("api_key", value)
