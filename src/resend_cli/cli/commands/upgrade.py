"""Upgrade check command for resend-cli."""

from __future__ import annotations

import typer
from rich.text import Text

from resend_cli import __version__
from resend_cli.cli.app import get_app_context
from resend_cli.cli.app import handle_errors
from resend_cli.cli.atyper import ATyper
from resend_cli.core.version_check import PACKAGE_NAME
from resend_cli.core.version_check import UPGRADE_COMMAND
from resend_cli.core.version_check import get_latest_version
from resend_cli.core.version_check import is_newer
from resend_cli.display.json import output_json_pretty
from resend_cli.display.rich import format_success
from resend_cli.errors import NetworkError
from resend_cli.errors import messages

upgrade_app = ATyper(help="Check for updates and show upgrade instructions.")


@upgrade_app.command("check")
async def upgrade_check_command(ctx: typer.Context) -> None:
    """Check for a new version and show upgrade instructions."""
    app_ctx = get_app_context(ctx)
    console = app_ctx.console

    with handle_errors(app_ctx):
        if app_ctx.json_mode or app_ctx.quiet:
            latest = await get_latest_version()
        else:
            with console.status("Checking for updates..."):
                latest = await get_latest_version()
        if latest is None:
            raise NetworkError(messages.REGISTRY_UNREACHABLE)

    update_available = is_newer(latest, __version__)

    if app_ctx.json_mode:
        output_json_pretty(
            {
                "current": __version__,
                "latest": latest,
                "update_available": update_available,
            }
        )
        return

    if not update_available:
        console.print(format_success("You're on the latest version."))
        return

    console.print(format_success(f"A new version ({latest}) is available."))
    console.print(Text(f"You are on {__version__}.", style="dim"))
    console.print()
    console.print("[cyan]Upgrade with:[/cyan]")
    console.print(f"  {UPGRADE_COMMAND}")
    console.print()
    console.print(Text(f"Or with pip: pip install --upgrade {PACKAGE_NAME}", style="dim"))
