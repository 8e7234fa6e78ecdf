"""Rich-based rendering utilities for resend-cli."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from resend_cli.auth.base import mask_api_key
from resend_cli.models import KeyListing


def format_error(message: str) -> Text:
    """Format a one-line error message."""
    return Text(f"Error: {message}", style="red")


def format_success(message: str) -> Text:
    return Text(f"Success: {message}", style="green")


def format_active_key(name: str, key: str, label: str = "Active key") -> Text:
    """Format ``<label>: name (masked token)``.

    Args:
        name: Saved key name
        key: The secret; only its masked form is rendered
        label: Leading label

    Returns:
        Rich Text with the name highlighted and the token dimmed
    """
    text = Text(f"{label}: ")
    text.append(name, style="cyan")
    text.append(" (")
    text.append(mask_api_key(key), style="dim")
    text.append(")")
    return text


def render_key_table(listing: KeyListing) -> Table:
    """Render saved keys with the active one marked."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Token", style="dim")
    table.add_column("Selected")

    for item in listing.keys:
        table.add_row(
            item.name,
            mask_api_key(item.key),
            "[green]yes[/green]" if item.name == listing.selected else "",
        )

    return table
