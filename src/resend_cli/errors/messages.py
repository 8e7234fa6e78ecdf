"""User-facing message templates."""

from __future__ import annotations

API_KEY_MISSING = (
    "API key not found. Please run `resend auth login` "
    "or set RESEND_API_KEY environment variable."
)
NO_SAVED_KEYS = "No saved keys. Run `resend auth login` to add one."
ENV_OVERRIDE_HINT = "RESEND_API_KEY is set and overrides saved keys for this process."
ENV_LOGOUT_HINT = (
    "RESEND_API_KEY is currently active from environment. "
    "Unset it to log out from env-based auth."
)
NO_ACTIVE_KEY = "No active saved key to log out."
API_KEY_REQUIRED = "API key is required"
API_KEY_PREFIX_REQUIRED = "API key must start with re_"
KEY_NAME_REQUIRED = "Key name is required"
LOGIN_CANCELLED = "Login cancelled."
INIT_CANCELLED = "Initialization cancelled."
CANCELLED = "Cancelled."
REGISTRY_UNREACHABLE = (
    "Could not reach the package index. Check your network or try again later."
)

ENV_DOC = """\
Environment variables (optional overrides):
  RESEND_API_KEY               API key; always wins over saved keys
  RESEND_CLI_CONFIG_DIR        Directory holding config.json
  RESEND_CLI_NO_VERSION_CHECK  Disable the update notice
  LOG_LEVEL                    Log level for diagnostics on stderr"""
