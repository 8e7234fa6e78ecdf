"""Main CLI application for resend-cli."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import IntEnum

import typer
from rich.console import Console

from resend_cli import __version__
from resend_cli.cli.atyper import ATyper
from resend_cli.context import AppContext
from resend_cli.display.json import output_json_error
from resend_cli.display.rich import format_error
from resend_cli.errors import ErrorCategory
from resend_cli.errors import ResendCliError
from resend_cli.errors import messages
from resend_cli.log import configure_logging

logger = logging.getLogger(__name__)

# Create the main app
app = ATyper(
    name="resend",
    help="Command-line client for the Resend email API",
    add_completion=True,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


class ExitCode(IntEnum):
    """Exit codes for resend-cli."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 2
    NETWORK_ERROR = 3
    VALIDATION_ERROR = 4
    NOT_FOUND = 5
    CANCELLED = 130  # 128 + SIGINT


EXIT_CODES: dict[ErrorCategory, ExitCode] = {
    ErrorCategory.VALIDATION: ExitCode.VALIDATION_ERROR,
    ErrorCategory.NOT_FOUND: ExitCode.NOT_FOUND,
    ErrorCategory.AUTHENTICATION: ExitCode.AUTH_ERROR,
    ErrorCategory.NETWORK: ExitCode.NETWORK_ERROR,
    ErrorCategory.CANCELLED: ExitCode.CANCELLED,
    ErrorCategory.UNEXPECTED: ExitCode.GENERAL_ERROR,
}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"resend-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Enable quiet mode"),
    no_check_version: bool = typer.Option(
        False, "--no-check-version", help="Skip the update notice"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Resend CLI - manage API keys and talk to the Resend API."""
    # Resolve conflicts: verbose and quiet are mutually exclusive, quiet takes precedence
    if verbose and quiet:
        verbose = False

    ctx.meta["json"] = json
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet

    app_ctx = AppContext.create(json_mode=json, quiet=quiet)
    configure_logging(verbose, console=app_ctx.err_console)
    ctx.obj = app_ctx

    if not (no_check_version or json or quiet):
        ctx.call_on_close(lambda: _notify_if_outdated(app_ctx))


def _notify_if_outdated(app_ctx: AppContext) -> None:
    from resend_cli.core.version_check import notify_if_outdated
    from resend_cli.core.version_check import version_check_disabled

    if version_check_disabled(app_ctx.resolver.environ):
        return
    try:
        asyncio.run(notify_if_outdated(__version__, app_ctx.settings, app_ctx.err_console))
    except ResendCliError as e:
        logger.debug("Update check skipped: %s", e.message)


def get_app_context(ctx: typer.Context, json_output: bool = False) -> AppContext:
    """Return the invocation's AppContext, creating one if the root callback
    did not run (e.g. a command function called directly)."""
    app_ctx = ctx.obj if isinstance(ctx.obj, AppContext) else None
    if app_ctx is None:
        app_ctx = AppContext.create(json_mode=bool(ctx.meta.get("json", False)))
        ctx.obj = app_ctx
    if json_output:
        app_ctx.json_mode = True
    return app_ctx


def report_error(app_ctx: AppContext, error: ResendCliError) -> None:
    """Print a single-line error, or a JSON envelope in JSON mode."""
    if app_ctx.json_mode:
        output_json_error(error.message, category=error.category.value)
    else:
        app_ctx.err_console.print(format_error(error.message))


@contextmanager
def handle_errors(app_ctx: AppContext) -> Iterator[None]:
    """Turn ResendCliError into a message and the matching exit code."""
    try:
        yield
    except ResendCliError as e:
        report_error(app_ctx, e)
        raise typer.Exit(EXIT_CODES[e.category]) from e


def exit_cancelled(app_ctx: AppContext, message: str = messages.CANCELLED) -> None:
    """Report a user cancellation and exit with the reserved code."""
    if app_ctx.json_mode:
        output_json_error(message, category=ErrorCategory.CANCELLED.value)
    else:
        app_ctx.err_console.print(f"[yellow]{message}[/yellow]")
    raise typer.Exit(ExitCode.CANCELLED)


def _json_requested(args: list[str]) -> bool:
    return "--json" in args or "-j" in args


def run_app(args: list[str] | None = None) -> None:
    """Run the CLI app.

    Never shows a traceback: anything that escapes a command is reported as
    a single line (or a JSON envelope with --json).
    """
    argv = sys.argv[1:] if args is None else args
    err_console = Console(stderr=True)

    def fail(message: str, category: ErrorCategory, code: ExitCode) -> None:
        if _json_requested(argv):
            output_json_error(message, category=category.value)
        else:
            err_console.print(format_error(message))
        sys.exit(code)

    try:
        result = app(args=argv, prog_name="resend", standalone_mode=False)
    except (typer.Abort, KeyboardInterrupt):
        if _json_requested(argv):
            output_json_error(messages.CANCELLED, category=ErrorCategory.CANCELLED.value)
        else:
            err_console.print(f"[yellow]{messages.CANCELLED}[/yellow]")
        sys.exit(ExitCode.CANCELLED)
    except typer.TyperException as e:
        # Usage errors carry exit code 2 and print their own usage hint
        if hasattr(e, "show"):
            e.show()
        else:
            err_console.print(format_error(e.format_message()))
        sys.exit(e.exit_code)
    except ResendCliError as e:
        fail(e.message, e.category, EXIT_CODES[e.category])
    except Exception as e:  # noqa: BLE001
        fail(str(e) or type(e).__name__, ErrorCategory.UNEXPECTED, ExitCode.GENERAL_ERROR)

    sys.exit(result if isinstance(result, int) else ExitCode.SUCCESS)


# Import command modules and register their typer groups
# These imports must come after app is defined
from resend_cli.cli.commands import auth as auth_cmd  # noqa: E402
from resend_cli.cli.commands import config as config_cmd  # noqa: E402
from resend_cli.cli.commands import init as init_cmd  # noqa: E402, F401 (registers init command)
from resend_cli.cli.commands import upgrade as upgrade_cmd  # noqa: E402

app.add_typer(auth_cmd.auth_app, name="auth")
app.add_typer(config_cmd.config_app, name="config")
app.add_typer(upgrade_cmd.upgrade_app, name="upgrade")
