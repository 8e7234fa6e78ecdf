"""Config management commands for resend-cli."""

from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from resend_cli.cli.app import get_app_context
from resend_cli.cli.app import handle_errors
from resend_cli.cli.atyper import ATyper
from resend_cli.config.paths import config_dir
from resend_cli.display.json import output_json_pretty
from resend_cli.display.rich import format_success
from resend_cli.errors import ValidationError

# Create config group
config_app = ATyper(help="Manage configuration settings.")


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Display current settings (secrets are never shown)."""
    app_ctx = get_app_context(ctx)
    console = app_ctx.console

    with handle_errors(app_ctx):
        settings = app_ctx.settings
        data = {
            "path": str(app_ctx.store.path),
            "profile": settings.profile,
            "default_from": settings.default_from,
            "selected_key": app_ctx.keyring.selected_key_name,
            "saved_keys": len(app_ctx.keyring.list_keys()),
            "env_override": app_ctx.resolver.env_api_key is not None,
        }

    if app_ctx.json_mode:
        output_json_pretty(data)
        return

    if app_ctx.quiet:
        console.print(data["path"])
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for setting, value in data.items():
        table.add_row(setting, "-" if value is None else str(value))
    console.print(table)


@config_app.command("path")
def config_path_command(ctx: typer.Context) -> None:
    """Show the config file location."""
    app_ctx = get_app_context(ctx)

    if app_ctx.json_mode:
        output_json_pretty(
            {"config_dir": str(config_dir()), "config_file": str(app_ctx.store.path)}
        )
        return

    app_ctx.console.print(Text(str(app_ctx.store.path)))


@config_app.command("default-from")
def default_from_command(
    ctx: typer.Context,
    address: str = typer.Argument(None, help="Sender address, e.g. you@example.com"),
    unset: bool = typer.Option(False, "--unset", help="Clear the default sender"),
) -> None:
    """Show, set, or clear the default sender address."""
    app_ctx = get_app_context(ctx)
    console = app_ctx.console
    settings = app_ctx.settings

    with handle_errors(app_ctx):
        if unset:
            settings.default_from = None
        elif address is not None:
            if not address.strip():
                raise ValidationError("Sender address cannot be empty")
            settings.default_from = address.strip()
        current = settings.default_from

    if app_ctx.json_mode:
        output_json_pretty({"default_from": current})
        return

    if unset:
        console.print(format_success("Cleared default sender."))
    elif address is not None:
        console.print(format_success(f"Default sender set to {current}."))
    elif current:
        console.print(Text(current))
    else:
        console.print(Text("No default sender set.", style="yellow"))
