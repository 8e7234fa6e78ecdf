"""Configuration management for resend-cli."""

from resend_cli.config.keyring import Keyring
from resend_cli.config.paths import (
    config_dir,
    config_file,
)
from resend_cli.config.resolver import API_KEY_ENV, CredentialResolver
from resend_cli.config.settings import Settings
from resend_cli.config.store import ConfigStore

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # store
    "ConfigStore",
    "Settings",
    # keys
    "Keyring",
    "CredentialResolver",
    "API_KEY_ENV",
]
