"""Display utilities for resend-cli.

This module provides rendering and output utilities for both terminal
(Rich-based) and JSON output modes.
"""
from __future__ import annotations

from resend_cli.display.json import encode_json
from resend_cli.display.json import output_json
from resend_cli.display.json import output_json_error
from resend_cli.display.json import output_json_pretty
from resend_cli.display.rich import format_active_key
from resend_cli.display.rich import format_error
from resend_cli.display.rich import format_success
from resend_cli.display.rich import render_key_table

__all__ = [
    # Rich rendering
    "format_error",
    "format_success",
    "format_active_key",
    "render_key_table",
    # JSON output
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "encode_json",
]
