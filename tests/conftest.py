"""Pytest configuration and shared fixtures for resend-cli tests."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from resend_cli.auth.base import CANCELLED, Ok, PromptResult, Validator
from resend_cli.auth.workflow import AuthWorkflow
from resend_cli.config.keyring import Keyring
from resend_cli.config.resolver import CredentialResolver
from resend_cli.config.settings import Settings
from resend_cli.config.store import ConfigStore

ENV_VARS = (
    "RESEND_API_KEY",
    "RESEND_CLI_NO_VERSION_CHECK",
    "NO_UPDATE_NOTIFIER",
    "LOG_LEVEL",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every test at a throwaway config dir and a clean environment."""
    config_dir = tmp_path / "resend-cli"
    monkeypatch.setenv("RESEND_CLI_CONFIG_DIR", str(config_dir))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return config_dir


@pytest.fixture
def config_path(isolated_config_dir: Path) -> Path:
    return isolated_config_dir / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    return ConfigStore(config_path)


@pytest.fixture
def keyring(store: ConfigStore) -> Keyring:
    return Keyring(store)


@pytest.fixture
def environ() -> dict[str, str]:
    """Environment mapping handed to the resolver; mutate it per test."""
    return {}


@pytest.fixture
def resolver(keyring: Keyring, environ: dict[str, str]) -> CredentialResolver:
    return CredentialResolver(keyring, environ)


@pytest.fixture
def settings(store: ConfigStore) -> Settings:
    return Settings(store)


class ScriptedPrompter:
    """Prompter that replays canned answers.

    Each answer is a string (``Ok``) or ``CANCELLED``. Calls are recorded as
    ``(kind, message, extra)`` tuples.
    """

    def __init__(self, *answers: str | object) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, object]] = []

    def _next(self) -> PromptResult[str]:
        if not self.answers:
            raise AssertionError("Unexpected prompt")
        answer = self.answers.pop(0)
        if answer is CANCELLED:
            return CANCELLED
        return Ok(answer)

    def select(self, message: str, options: Sequence[tuple[str, str]]) -> PromptResult[str]:
        self.calls.append(("select", message, [value for value, _ in options]))
        return self._next()

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
        hide_input: bool = False,
    ) -> PromptResult[str]:
        self.calls.append(("text", message, default))
        return self._next()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def workflow(
    keyring: Keyring, resolver: CredentialResolver, prompter: ScriptedPrompter
) -> AuthWorkflow:
    return AuthWorkflow(keyring, resolver, prompter)


@pytest.fixture
def mock_httpx_client() -> httpx.AsyncClient:
    """Mock httpx.AsyncClient."""
    client = MagicMock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


@pytest.fixture
def mock_response() -> MagicMock:
    """Mock httpx.Response."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    response.json = MagicMock(return_value={})
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def make_prompter() -> type[ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels set by ``configure_logging`` in CLI tests."""
    logger = logging.getLogger("resend_cli")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
