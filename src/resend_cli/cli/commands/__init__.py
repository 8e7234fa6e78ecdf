"""CLI commands for resend-cli."""

# Top-level commands
from resend_cli.cli.commands.init import init_command

# Command groups (registered with the main app in cli.app)
from resend_cli.cli.commands import (
    auth,
    config,
    upgrade,
)

__all__ = [
    # Top-level commands
    "init_command",
    # Command groups
    "auth",
    "config",
    "upgrade",
]
