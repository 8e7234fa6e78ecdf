"""Platform-specific paths for resend-cli configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_NAME = "resend-cli"
CONFIG_DIR_ENV = "RESEND_CLI_CONFIG_DIR"


def _get_env_path(env_var: str, fallback: Path) -> Path:
    """Get path from environment variable or fallback."""
    if env_value := os.environ.get(env_var):
        return Path(env_value)
    return fallback


def config_dir() -> Path:
    """Get user config directory.

    Respects RESEND_CLI_CONFIG_DIR environment variable.
    """
    base_dir = Path(user_config_dir(PACKAGE_NAME))
    return _get_env_path(CONFIG_DIR_ENV, base_dir)


def config_file() -> Path:
    """Get main config.json path."""
    return config_dir() / "config.json"
