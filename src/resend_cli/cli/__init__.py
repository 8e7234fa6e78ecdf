"""CLI framework for resend-cli."""
from __future__ import annotations

from resend_cli.cli.app import ExitCode
from resend_cli.cli.app import app
from resend_cli.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
