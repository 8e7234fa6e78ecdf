"""First-run setup command for resend-cli."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel
from rich.text import Text

from resend_cli.auth.base import mask_api_key
from resend_cli.cli.app import app
from resend_cli.cli.app import exit_cancelled
from resend_cli.cli.app import get_app_context
from resend_cli.cli.app import handle_errors
from resend_cli.config.resolver import API_KEY_ENV
from resend_cli.display.json import output_json_pretty
from resend_cli.display.rich import format_success
from resend_cli.errors import messages
from resend_cli.models import LoginStatus


def append_key_to_env_file(path: Path, api_key: str) -> bool:
    """Append ``RESEND_API_KEY=...`` to a dotenv file.

    Returns:
        True if written, False if the file already defines the variable
    """
    content = path.read_text() if path.exists() else ""
    if f"{API_KEY_ENV}=" in content:
        return False

    line = f"{API_KEY_ENV}={api_key}\n"
    if content and not content.endswith("\n"):
        line = "\n" + line
    with path.open("a") as f:
        f.write(line)
    return True


@app.command("init")
def init_command(
    ctx: typer.Context,
    key: str = typer.Option(
        None, "--key", "-k", help="Resend API key (prompted if omitted)"
    ),
    write_env: bool = typer.Option(
        False,
        "--write-env",
        help=f"Write {API_KEY_ENV} to .env in the current directory (if not present)",
    ),
) -> None:
    """Initialize the CLI: store an API key and show supported env vars."""
    app_ctx = get_app_context(ctx)
    console = app_ctx.console

    if not app_ctx.json_mode and key is None:
        console.print(Panel("[bold cyan]Resend CLI Initialization[/bold cyan]", expand=False))

    with handle_errors(app_ctx):
        outcome = app_ctx.workflow.init(key)

    if outcome.status is LoginStatus.CANCELLED:
        exit_cancelled(app_ctx, messages.INIT_CANCELLED)

    env_written: bool | None = None
    env_error: str | None = None
    if write_env:
        try:
            env_written = append_key_to_env_file(Path.cwd() / ".env", outcome.key)
        except OSError as e:
            env_error = f"Could not write .env: {e.strerror or e}"

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "name": outcome.name,
                "token": mask_api_key(outcome.key),
                "env_written": env_written,
                "env_error": env_error,
            }
        )
        return

    if env_written:
        console.print(Text(f"Appended {API_KEY_ENV} to .env", style="dim"))
    elif env_written is False:
        console.print(
            Text(f".env already contains {API_KEY_ENV}; not overwriting.", style="dim")
        )
    if env_error:
        console.print(Text(env_error, style="yellow"))

    console.print(format_success("Initialized. You can now use the CLI."))
    if not app_ctx.quiet:
        console.print()
        console.print(Text(messages.ENV_DOC, style="dim"))
