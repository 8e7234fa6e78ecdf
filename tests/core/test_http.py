"""Tests for HTTP client helpers."""

from __future__ import annotations

from contextlib import asynccontextmanager
from unittest.mock import MagicMock
from unittest.mock import patch

import httpx
import pytest

from resend_cli.core.http import DEFAULT_TIMEOUT
from resend_cli.core.http import USER_AGENT
from resend_cli.core.http import fetch_json
from resend_cli.core.http import get_http_client
from resend_cli.core.http import get_timeout_config


def client_returning(client):
    @asynccontextmanager
    async def factory(*args, **kwargs):
        yield client

    return factory


class TestTimeoutConfig:
    def test_default(self):
        timeout = get_timeout_config()
        assert timeout.read == DEFAULT_TIMEOUT
        assert timeout.connect == DEFAULT_TIMEOUT

    def test_connect_is_capped(self):
        assert get_timeout_config(30.0).connect == 10.0


class TestGetHttpClient:
    @pytest.mark.asyncio
    async def test_yields_configured_client(self):
        async with get_http_client() as client:
            assert isinstance(client, httpx.AsyncClient)
            assert client.headers["User-Agent"] == USER_AGENT
            assert client.follow_redirects is True
        assert client.is_closed


class TestFetchJson:
    @pytest.mark.asyncio
    async def test_returns_decoded_body(self, mock_httpx_client, mock_response):
        mock_response.json.return_value = {"info": {"version": "1.2.3"}}
        mock_httpx_client.get.return_value = mock_response

        with patch("resend_cli.core.http.get_http_client", client_returning(mock_httpx_client)):
            data = await fetch_json("https://example.test/x", headers={"Accept": "application/json"})

        assert data == {"info": {"version": "1.2.3"}}
        mock_httpx_client.get.assert_awaited_once_with(
            "https://example.test/x", headers={"Accept": "application/json"}
        )

    @pytest.mark.asyncio
    async def test_network_error_returns_none(self, mock_httpx_client):
        mock_httpx_client.get.side_effect = httpx.ConnectError("refused")

        with patch("resend_cli.core.http.get_http_client", client_returning(mock_httpx_client)):
            assert await fetch_json("https://example.test/x") is None

    @pytest.mark.asyncio
    async def test_http_status_error_returns_none(self, mock_httpx_client, mock_response):
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "404", request=MagicMock(), response=MagicMock()
        )
        mock_httpx_client.get.return_value = mock_response

        with patch("resend_cli.core.http.get_http_client", client_returning(mock_httpx_client)):
            assert await fetch_json("https://example.test/x") is None

    @pytest.mark.asyncio
    async def test_invalid_json_returns_none(self, mock_httpx_client, mock_response):
        mock_response.json.side_effect = ValueError("not json")
        mock_httpx_client.get.return_value = mock_response

        with patch("resend_cli.core.http.get_http_client", client_returning(mock_httpx_client)):
            assert await fetch_json("https://example.test/x") is None

    @pytest.mark.asyncio
    async def test_single_attempt(self, mock_httpx_client):
        mock_httpx_client.get.side_effect = httpx.ReadTimeout("slow")

        with patch("resend_cli.core.http.get_http_client", client_returning(mock_httpx_client)):
            await fetch_json("https://example.test/x")

        assert mock_httpx_client.get.await_count == 1
