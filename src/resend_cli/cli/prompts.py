"""Interactive prompts backed by typer.

Every prompt returns ``Ok(value)`` or ``CANCELLED``; Ctrl+C and EOF never
escape as exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence

import typer
from rich.console import Console

from resend_cli.auth.base import CANCELLED
from resend_cli.auth.base import Ok
from resend_cli.auth.base import PromptResult
from resend_cli.auth.base import Validator

_ABORTS = (typer.Abort, KeyboardInterrupt, EOFError)


class TerminalPrompter:
    """Prompter that reads from the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(
        self, message: str, options: Sequence[tuple[str, str]]
    ) -> PromptResult[str]:
        self.console.print(f"[bold]{message}[/bold]")
        for index, (_, label) in enumerate(options, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]. {label}")

        while True:
            try:
                choice = typer.prompt("Choose", type=int, default=1)
            except _ABORTS:
                return CANCELLED

            if 1 <= choice <= len(options):
                return Ok(options[choice - 1][0])
            self.console.print(f"[red]Choose a number between 1 and {len(options)}[/red]")

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
        hide_input: bool = False,
    ) -> PromptResult[str]:
        while True:
            try:
                value = typer.prompt(
                    message.rstrip(":"),
                    default=default if default is not None else "",
                    show_default=bool(default),
                    hide_input=hide_input,
                )
            except _ABORTS:
                return CANCELLED

            value = value.strip()
            error = validate(value) if validate else None
            if error is None:
                return Ok(value)
            self.console.print(f"[red]{error}[/red]")
