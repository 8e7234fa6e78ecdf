"""Authentication flows for resend-cli."""
from __future__ import annotations

from resend_cli.auth.base import CANCELLED
from resend_cli.auth.base import Cancelled
from resend_cli.auth.base import Ok
from resend_cli.auth.base import Prompter
from resend_cli.auth.base import PromptResult
from resend_cli.auth.base import default_add_key_name
from resend_cli.auth.base import default_login_name
from resend_cli.auth.base import mask_api_key
from resend_cli.auth.base import validate_api_key
from resend_cli.auth.base import validate_key_name
from resend_cli.auth.workflow import AuthWorkflow

__all__ = [
    "AuthWorkflow",
    "Prompter",
    "PromptResult",
    "Ok",
    "Cancelled",
    "CANCELLED",
    "mask_api_key",
    "validate_api_key",
    "validate_key_name",
    "default_add_key_name",
    "default_login_name",
]
