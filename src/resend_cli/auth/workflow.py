"""Login, logout, and key inspection flows.

The workflow holds no state of its own between runs; everything persistent
lives in the keyring. Commands call these methods and only render results.
"""

from __future__ import annotations

import logging

from resend_cli.auth.base import Cancelled
from resend_cli.auth.base import Prompter
from resend_cli.auth.base import default_add_key_name
from resend_cli.auth.base import default_login_name
from resend_cli.auth.base import validate_api_key
from resend_cli.auth.base import validate_key_name
from resend_cli.config.keyring import Keyring
from resend_cli.config.resolver import CredentialResolver
from resend_cli.errors import KeyNotFoundError
from resend_cli.errors import NotAuthenticatedError
from resend_cli.errors import ValidationError
from resend_cli.errors import messages
from resend_cli.models import DEFAULT_KEY_NAME
from resend_cli.models import KeyListing
from resend_cli.models import LoginAction
from resend_cli.models import LoginOutcome
from resend_cli.models import LoginStatus
from resend_cli.models import LogoutOutcome
from resend_cli.models import LogoutStatus
from resend_cli.models import ResolvedKey
from resend_cli.models import SavedKey

logger = logging.getLogger(__name__)

_CANCELLED = LoginOutcome(status=LoginStatus.CANCELLED)


class AuthWorkflow:
    def __init__(
        self,
        keyring: Keyring,
        resolver: CredentialResolver,
        prompter: Prompter,
    ) -> None:
        self.keyring = keyring
        self.resolver = resolver
        self.prompter = prompter

    def login(self, key: str | None = None, name: str | None = None) -> LoginOutcome:
        """Save and select an API key, prompting for whatever is missing.

        With keys already saved and no ``key`` given, the user chooses to use
        an existing key, add a new one, or replace the active one. Nothing is
        persisted if any prompt is cancelled.
        """
        saved = self.keyring.list_keys()
        selected = self.keyring.selected_key_name

        if name is not None:
            name = name.strip()
            if error := validate_key_name(name):
                raise ValidationError(error)
        if key is not None:
            key = key.strip()
            if error := validate_api_key(key):
                raise ValidationError(error)

        if key is None and saved:
            answer = self.prompter.select(
                "You already have saved keys. What do you want to do?",
                [(action.value, action.label) for action in LoginAction],
            )
            if isinstance(answer, Cancelled):
                return _CANCELLED
            action = LoginAction(answer.value)

            if action is LoginAction.USE:
                return self._use_existing(saved, selected, name)

            if action is LoginAction.REPLACE and name is None:
                name = selected or saved[0].name

            if action is LoginAction.ADD and name is None:
                answer = self.prompter.text(
                    "Name for this key:",
                    default=default_add_key_name(saved),
                    validate=validate_key_name,
                )
                if isinstance(answer, Cancelled):
                    return _CANCELLED
                name = answer.value.strip()

        if key is None:
            answer = self.prompter.text(
                "Enter your Resend API key:",
                validate=validate_api_key,
                hide_input=True,
            )
            if isinstance(answer, Cancelled):
                return _CANCELLED
            key = answer.value.strip()
            if error := validate_api_key(key):
                raise ValidationError(error)

        if name is None:
            name = default_login_name(saved, selected)

        self.keyring.save_key(name, key)
        self.keyring.select_key(name)
        return LoginOutcome(status=LoginStatus.SAVED, name=name, key=key)

    def _use_existing(
        self,
        saved: list[SavedKey],
        selected: str | None,
        name: str | None,
    ) -> LoginOutcome:
        if name is not None:
            return self._selected(self.select(name))

        if selected:
            return LoginOutcome(
                status=LoginStatus.ALREADY_ACTIVE,
                name=selected,
                key=self.keyring.get_key(selected),
            )

        if len(saved) == 1:
            return self._selected(self.select(saved[0].name))

        answer = self.prompter.select(
            "Select a saved key:",
            [(item.name, item.name) for item in saved],
        )
        if isinstance(answer, Cancelled):
            return _CANCELLED
        return self._selected(self.select(answer.value))

    @staticmethod
    def _selected(item: SavedKey) -> LoginOutcome:
        return LoginOutcome(status=LoginStatus.SELECTED, name=item.name, key=item.key)

    def logout(self, name: str | None = None, all_keys: bool = False) -> LogoutOutcome:
        """Remove one saved key, the active key, or all of them."""
        if all_keys:
            self.keyring.clear_saved_keys()
            return LogoutOutcome(status=LogoutStatus.REMOVED_ALL)

        if name is not None:
            if not self.keyring.remove_key(name):
                raise KeyNotFoundError(name)
            return LogoutOutcome(
                status=LogoutStatus.REMOVED,
                name=name,
                selected=self.keyring.selected_key_name,
            )

        selected = self.keyring.selected_key_name
        if selected and not self.keyring.remove_key(selected):
            # Selection names a key that is no longer saved
            logger.warning("Selected key '%s' is not saved; clearing selection", selected)
            self.keyring.clear_selection()
            selected = None

        if not selected:
            if self.resolver.env_api_key:
                return LogoutOutcome(status=LogoutStatus.ENVIRONMENT_ONLY)
            raise KeyNotFoundError(message=messages.NO_ACTIVE_KEY)

        return LogoutOutcome(
            status=LogoutStatus.REMOVED_ACTIVE,
            name=selected,
            selected=self.keyring.selected_key_name,
        )

    def whoami(self) -> ResolvedKey:
        resolved = self.resolver.resolve()
        if resolved is None:
            raise NotAuthenticatedError(messages.API_KEY_MISSING)
        return resolved

    def list_keys(self) -> KeyListing:
        return KeyListing(
            keys=self.keyring.list_keys(),
            selected=self.keyring.selected_key_name,
            env_key=self.resolver.env_api_key,
        )

    def select(self, name: str) -> SavedKey:
        """Make a saved key active."""
        if not self.keyring.select_key(name):
            raise KeyNotFoundError(name)
        return SavedKey(name=name, key=self.keyring.get_key(name))

    def init(self, key: str | None = None) -> LoginOutcome:
        """Store a key as the ``default`` key via the single-key setter."""
        if key is None:
            answer = self.prompter.text(
                "Enter your Resend API key:",
                validate=validate_api_key,
                hide_input=True,
            )
            if isinstance(answer, Cancelled):
                return _CANCELLED
            key = answer.value
        key = key.strip()
        if error := validate_api_key(key):
            raise ValidationError(error)

        self.resolver.set_legacy_api_key(key)
        logger.debug("Stored key through legacy setter")
        return LoginOutcome(status=LoginStatus.SAVED, name=DEFAULT_KEY_NAME, key=key)
