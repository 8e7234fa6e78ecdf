"""resend-cli: Command-line client for the Resend email API."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__", "main"]


def main() -> None:
    """Entry point for the resend CLI."""
    from resend_cli.cli.app import run_app

    run_app()
