"""Tests for the version check and update notice."""

from __future__ import annotations

from unittest.mock import AsyncMock
from unittest.mock import patch

import pytest
from rich.console import Console

from resend_cli.core.version_check import PYPI_URL
from resend_cli.core.version_check import THROTTLE
from resend_cli.core.version_check import get_latest_version
from resend_cli.core.version_check import is_newer
from resend_cli.core.version_check import notify_if_outdated
from resend_cli.core.version_check import parse_version
from resend_cli.core.version_check import version_check_disabled

FETCH = "resend_cli.core.version_check.fetch_json"
NOW = 1_700_000_000_000
THROTTLE_MS = int(THROTTLE.total_seconds() * 1000)


@pytest.fixture
def console():
    return Console(record=True, width=200)


class TestParseVersion:
    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("1.2.3", (1, 2, 3)),
            ("1.2", (1, 2, 0)),
            ("2", (2, 0, 0)),
            ("1.4.0-beta.1", (1, 4, 0)),
            (" 0.10.1 ", (0, 10, 1)),
            ("garbage", (0, 0, 0)),
        ],
    )
    def test_parse(self, version, expected):
        assert parse_version(version) == expected

    def test_is_newer(self):
        assert is_newer("0.2.0", "0.1.9")
        assert is_newer("0.10.0", "0.9.0")
        assert not is_newer("0.1.0", "0.1.0")
        assert not is_newer("0.0.9", "0.1.0")


class TestGetLatestVersion:
    @pytest.mark.asyncio
    async def test_reads_info_version(self):
        with patch(FETCH, new=AsyncMock(return_value={"info": {"version": "1.2.3"}})) as mock:
            assert await get_latest_version() == "1.2.3"
        assert mock.await_args.args[0] == PYPI_URL

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, [], {}, {"info": None}, {"info": {"version": 3}}])
    async def test_unusable_payload(self, payload):
        with patch(FETCH, new=AsyncMock(return_value=payload)):
            assert await get_latest_version() is None


class TestVersionCheckDisabled:
    def test_enabled_by_default(self):
        assert version_check_disabled({}) is False

    @pytest.mark.parametrize("value", ["1", "true", "yes"])
    def test_opt_out(self, value):
        assert version_check_disabled({"RESEND_CLI_NO_VERSION_CHECK": value})

    @pytest.mark.parametrize("value", ["0", "false", "False"])
    def test_opt_out_falsey_values(self, value):
        assert not version_check_disabled({"RESEND_CLI_NO_VERSION_CHECK": value})

    def test_no_update_notifier(self):
        assert version_check_disabled({"NO_UPDATE_NOTIFIER": "1"})

    def test_custom_config_dir(self):
        assert version_check_disabled({"RESEND_CLI_CONFIG_DIR": "/tmp/x"})


class TestNotifyIfOutdated:
    @pytest.mark.asyncio
    async def test_prints_notice(self, settings, console):
        with patch(FETCH, new=AsyncMock(return_value={"info": {"version": "9.9.9"}})):
            shown = await notify_if_outdated("0.1.0", settings, console, now_ms=NOW)

        assert shown is True
        output = console.export_text()
        assert "update available" in output
        assert "9.9.9" in output
        assert settings.last_version_check_at == NOW

    @pytest.mark.asyncio
    async def test_up_to_date(self, settings, console):
        with patch(FETCH, new=AsyncMock(return_value={"info": {"version": "0.1.0"}})):
            shown = await notify_if_outdated("0.1.0", settings, console, now_ms=NOW)

        assert shown is False
        assert console.export_text() == ""
        assert settings.last_version_check_at == NOW

    @pytest.mark.asyncio
    async def test_throttled(self, settings, console):
        settings.last_version_check_at = NOW - THROTTLE_MS + 1
        mock = AsyncMock(return_value={"info": {"version": "9.9.9"}})

        with patch(FETCH, new=mock):
            shown = await notify_if_outdated("0.1.0", settings, console, now_ms=NOW)

        assert shown is False
        mock.assert_not_awaited()
        assert settings.last_version_check_at == NOW - THROTTLE_MS + 1

    @pytest.mark.asyncio
    async def test_checks_again_after_throttle(self, settings, console):
        settings.last_version_check_at = NOW - THROTTLE_MS
        mock = AsyncMock(return_value={"info": {"version": "9.9.9"}})

        with patch(FETCH, new=mock):
            await notify_if_outdated("0.1.0", settings, console, now_ms=NOW)

        mock.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unreachable_is_silent(self, settings, console):
        with patch(FETCH, new=AsyncMock(return_value=None)):
            shown = await notify_if_outdated("0.1.0", settings, console, now_ms=NOW)

        assert shown is False
        assert console.export_text() == ""
