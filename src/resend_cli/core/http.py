"""HTTP client helpers for resend-cli."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from resend_cli import __version__

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0
USER_AGENT = f"resend-cli/{__version__}"


def get_timeout_config(timeout: float = DEFAULT_TIMEOUT) -> httpx.Timeout:
    return httpx.Timeout(timeout, connect=min(timeout, 10.0))


@asynccontextmanager
async def get_http_client(
    timeout: float = DEFAULT_TIMEOUT,
) -> AsyncIterator[httpx.AsyncClient]:
    """Open an HTTP client for the duration of the block.

    Usage:
        async with get_http_client() as client:
            response = await client.get(...)
    """
    async with httpx.AsyncClient(
        timeout=get_timeout_config(timeout),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    ) as client:
        yield client


async def fetch_json(url: str, headers: dict | None = None) -> object | None:
    """Fetch and decode a JSON document in a single attempt.

    Returns:
        Decoded body, or None on any network, HTTP, or decode error
    """
    try:
        async with get_http_client() as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.debug("GET %s failed: %s", url, e)
        return None
