"""Per-invocation application context.

Built once by the root CLI callback and handed to commands through
``typer.Context.obj``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from resend_cli.auth.base import Prompter
from resend_cli.auth.workflow import AuthWorkflow
from resend_cli.config.keyring import Keyring
from resend_cli.config.resolver import CredentialResolver
from resend_cli.config.settings import Settings
from resend_cli.config.store import ConfigStore


@dataclass
class AppContext:
    store: ConfigStore
    keyring: Keyring
    resolver: CredentialResolver
    settings: Settings
    workflow: AuthWorkflow
    console: Console = field(default_factory=Console)
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    json_mode: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        *,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
        prompter: Prompter | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        json_mode: bool = False,
        quiet: bool = False,
    ) -> AppContext:
        console = console or Console()
        if prompter is None:
            from resend_cli.cli.prompts import TerminalPrompter

            prompter = TerminalPrompter(console)

        store = ConfigStore(config_path)
        keyring = Keyring(store)
        resolver = CredentialResolver(keyring, environ)
        return cls(
            store=store,
            keyring=keyring,
            resolver=resolver,
            settings=Settings(store),
            workflow=AuthWorkflow(keyring, resolver, prompter),
            console=console,
            err_console=err_console or Console(stderr=True),
            json_mode=json_mode,
            quiet=quiet,
        )
