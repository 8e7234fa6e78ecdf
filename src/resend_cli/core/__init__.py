"""Network helpers for resend-cli."""

from resend_cli.core.http import fetch_json, get_http_client, get_timeout_config
from resend_cli.core.version_check import (
    get_latest_version,
    is_newer,
    notify_if_outdated,
    parse_version,
    version_check_disabled,
)

__all__ = [
    # http
    "get_http_client",
    "get_timeout_config",
    "fetch_json",
    # version check
    "parse_version",
    "is_newer",
    "get_latest_version",
    "notify_if_outdated",
    "version_check_disabled",
]
