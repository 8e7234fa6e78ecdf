"""Authentication commands for resend-cli."""

from __future__ import annotations

import typer
from rich.text import Text

from resend_cli.auth.base import mask_api_key
from resend_cli.cli.app import exit_cancelled
from resend_cli.cli.app import get_app_context
from resend_cli.cli.app import handle_errors
from resend_cli.cli.atyper import ATyper
from resend_cli.display.json import output_json_pretty
from resend_cli.display.rich import format_active_key
from resend_cli.display.rich import format_success
from resend_cli.display.rich import render_key_table
from resend_cli.errors import messages
from resend_cli.models import LoginStatus
from resend_cli.models import LogoutStatus

auth_app = ATyper(help="Manage local CLI authentication.")

_JSON_OPTION = typer.Option(False, "--json", "-j", help="Output in JSON format")


@auth_app.command("login")
def login_command(
    ctx: typer.Context,
    key: str = typer.Option(
        None, "--key", "-k", help="Resend API key (starts with re_)"
    ),
    name: str = typer.Option(None, "--name", "-n", help="Name for this saved key"),
    json_output: bool = _JSON_OPTION,
) -> None:
    """Save/select an API key for CLI usage."""
    app_ctx = get_app_context(ctx, json_output)
    console = app_ctx.console

    with handle_errors(app_ctx):
        outcome = app_ctx.workflow.login(key=key, name=name)

    if outcome.status is LoginStatus.CANCELLED:
        exit_cancelled(app_ctx, messages.LOGIN_CANCELLED)

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "status": outcome.status.value,
                "name": outcome.name,
                "token": mask_api_key(outcome.key) if outcome.key else None,
            }
        )
        return

    if app_ctx.quiet:
        return

    match outcome.status:
        case LoginStatus.SAVED:
            console.print(format_success(f"Saved key '{outcome.name}' and made it active."))
            console.print(format_active_key(outcome.name, outcome.key))
        case LoginStatus.SELECTED:
            console.print(format_success(f"Selected '{outcome.name}' as active key."))
        case LoginStatus.ALREADY_ACTIVE:
            console.print(format_success(f"Already using '{outcome.name}'."))


@auth_app.command("logout")
def logout_command(
    ctx: typer.Context,
    name: str = typer.Option(
        None, "--name", "-n", help="Remove a specific saved key name"
    ),
    all_keys: bool = typer.Option(False, "--all", help="Remove all saved keys"),
    json_output: bool = _JSON_OPTION,
) -> None:
    """Remove saved key(s) from local CLI config."""
    app_ctx = get_app_context(ctx, json_output)
    console = app_ctx.console

    with handle_errors(app_ctx):
        outcome = app_ctx.workflow.logout(name=name, all_keys=all_keys)

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "status": outcome.status.value,
                "name": outcome.name,
                "selected": outcome.selected,
            }
        )
        return

    match outcome.status:
        case LogoutStatus.REMOVED_ALL:
            console.print(format_success("Removed all saved keys."))
        case LogoutStatus.REMOVED:
            console.print(format_success(f"Removed saved key '{outcome.name}'."))
        case LogoutStatus.REMOVED_ACTIVE:
            console.print(format_success(f"Removed active saved key '{outcome.name}'."))
        case LogoutStatus.ENVIRONMENT_ONLY:
            console.print(Text(messages.ENV_LOGOUT_HINT, style="yellow"))
            return

    if outcome.selected and not app_ctx.quiet:
        console.print(Text(f"Active key is now '{outcome.selected}'.", style="dim"))


@auth_app.command("whoami")
def whoami_command(
    ctx: typer.Context,
    json_output: bool = _JSON_OPTION,
) -> None:
    """Show current auth source and selected key."""
    app_ctx = get_app_context(ctx, json_output)
    console = app_ctx.console

    with handle_errors(app_ctx):
        resolved = app_ctx.workflow.whoami()

    selected = app_ctx.keyring.selected_key_name

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "source": resolved.source.value,
                "selected": selected,
                "token": mask_api_key(resolved.key),
            }
        )
        return

    if app_ctx.quiet:
        console.print(resolved.source.value)
        return

    console.print("[cyan]Current auth[/cyan]")
    console.print(f"Source: {resolved.source.value}")
    if selected:
        console.print(Text(f"Selected key: {selected}"))
    console.print(Text("Token: ").append(mask_api_key(resolved.key), style="dim"))


@auth_app.command("list")
def list_command(
    ctx: typer.Context,
    json_output: bool = _JSON_OPTION,
) -> None:
    """List saved API keys."""
    app_ctx = get_app_context(ctx, json_output)
    console = app_ctx.console

    with handle_errors(app_ctx):
        listing = app_ctx.workflow.list_keys()

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "keys": [
                    {
                        "name": item.name,
                        "token": mask_api_key(item.key),
                        "selected": item.name == listing.selected,
                    }
                    for item in listing.keys
                ],
                "selected": listing.selected,
                "env_override": listing.env_override,
            }
        )
        return

    if app_ctx.quiet:
        for item in listing.keys:
            console.print(Text(item.name))
        return

    if not listing.keys:
        console.print(Text(messages.NO_SAVED_KEYS, style="yellow"))
        if listing.env_key:
            console.print(
                Text("Environment key is set: ").append(
                    mask_api_key(listing.env_key), style="dim"
                )
            )
        return

    console.print(render_key_table(listing))

    if listing.env_override:
        console.print(Text(f"\n{messages.ENV_OVERRIDE_HINT}", style="dim"))


@auth_app.command("select")
def select_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Saved key name"),
    json_output: bool = _JSON_OPTION,
) -> None:
    """Select the active saved API key."""
    app_ctx = get_app_context(ctx, json_output)
    console = app_ctx.console

    with handle_errors(app_ctx):
        item = app_ctx.workflow.select(name)

    if app_ctx.json_mode:
        output_json_pretty({"selected": item.name, "token": mask_api_key(item.key)})
        return

    if app_ctx.quiet:
        return

    console.print(format_success(f"Selected '{item.name}' as active key."))
    console.print(Text("Active token: ").append(mask_api_key(item.key), style="dim"))
