"""Version check and upgrade notice.

The notice hits the package index at most once per ``THROTTLE``; the last
check time is kept in the config document.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Mapping
from datetime import timedelta

from rich.console import Console

from resend_cli.config.paths import CONFIG_DIR_ENV
from resend_cli.config.settings import Settings
from resend_cli.core.http import fetch_json

logger = logging.getLogger(__name__)

PACKAGE_NAME = "resend-cli"
PYPI_URL = f"https://pypi.org/pypi/{PACKAGE_NAME}/json"
THROTTLE = timedelta(hours=24)
NO_VERSION_CHECK_ENV = "RESEND_CLI_NO_VERSION_CHECK"
NO_UPDATE_NOTIFIER_ENV = "NO_UPDATE_NOTIFIER"
UPGRADE_COMMAND = f"pipx upgrade {PACKAGE_NAME}"

_VERSION_RE = re.compile(r"^(\d+)\.?(\d*)\.?(\d*)")


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``x.y.z`` (or ``x.y.z-pre``) into integers; missing parts are 0."""
    match = _VERSION_RE.match(version.strip())
    if not match:
        return (0, 0, 0)
    major, minor, patch = match.groups()
    return (int(major), int(minor or 0), int(patch or 0))


def is_newer(latest: str, current: str) -> bool:
    return parse_version(latest) > parse_version(current)


async def get_latest_version() -> str | None:
    """Latest published version, or None if the index is unreachable."""
    data = await fetch_json(PYPI_URL, headers={"Accept": "application/json"})
    if not isinstance(data, dict):
        return None
    version = (data.get("info") or {}).get("version")
    return version if isinstance(version, str) else None


def version_check_disabled(environ: Mapping[str, str]) -> bool:
    """True when the environment opts out of the update notice."""
    value = environ.get(NO_VERSION_CHECK_ENV)
    if value is not None and value != "0" and value.lower() != "false":
        return True
    if environ.get(NO_UPDATE_NOTIFIER_ENV):
        return True
    # Isolated config dirs (tests, scripted profiles) never phone home
    return bool(environ.get(CONFIG_DIR_ENV))


def _now_ms() -> int:
    return int(time.time() * 1000)


async def notify_if_outdated(
    current_version: str,
    settings: Settings,
    console: Console,
    now_ms: int | None = None,
) -> bool:
    """Print a one-line notice to ``console`` if a newer version exists.

    Returns:
        True if a notice was printed
    """
    now = _now_ms() if now_ms is None else now_ms
    last = settings.last_version_check_at
    if last is not None and now - last < THROTTLE.total_seconds() * 1000:
        return False
    settings.last_version_check_at = now

    latest = await get_latest_version()
    if not latest or not is_newer(latest, current_version):
        logger.debug("No update available (latest: %s)", latest)
        return False

    console.print(
        f"[dim]Resend CLI: update available (current: {current_version}, "
        f"latest: {latest}). Run [cyan]resend upgrade check[/cyan] for details.[/dim]"
    )
    return True
