"""Tests for error types."""

import pytest

from resend_cli.errors import ErrorCategory
from resend_cli.errors import KeyNotFoundError
from resend_cli.errors import NetworkError
from resend_cli.errors import NotAuthenticatedError
from resend_cli.errors import ResendCliError
from resend_cli.errors import StoreError
from resend_cli.errors import ValidationError
from resend_cli.errors import messages


class TestErrorCategory:
    def test_values(self):
        assert ErrorCategory.VALIDATION == "validation"
        assert ErrorCategory.NOT_FOUND == "not_found"
        assert ErrorCategory.CANCELLED == "cancelled"


class TestResendCliError:
    @pytest.mark.parametrize(
        ("cls", "category"),
        [
            (ValidationError, ErrorCategory.VALIDATION),
            (NotAuthenticatedError, ErrorCategory.AUTHENTICATION),
            (NetworkError, ErrorCategory.NETWORK),
            (StoreError, ErrorCategory.UNEXPECTED),
        ],
    )
    def test_categories(self, cls, category):
        error = cls("message")
        assert isinstance(error, ResendCliError)
        assert error.category is category
        assert error.message == "message"
        assert str(error) == "message"

    def test_to_dict(self):
        assert ValidationError("bad key").to_dict() == {
            "message": "bad key",
            "category": "validation",
        }


class TestKeyNotFoundError:
    def test_default_message(self):
        error = KeyNotFoundError("work")
        assert error.name == "work"
        assert error.message == "No saved key found with name 'work'."
        assert error.category is ErrorCategory.NOT_FOUND

    def test_custom_message(self):
        error = KeyNotFoundError(message=messages.NO_ACTIVE_KEY)
        assert error.name is None
        assert error.message == "No active saved key to log out."


class TestMessages:
    def test_env_doc_lists_variables(self):
        for name in ("RESEND_API_KEY", "RESEND_CLI_CONFIG_DIR", "LOG_LEVEL"):
            assert name in messages.ENV_DOC

    def test_missing_key_points_at_login(self):
        assert "resend auth login" in messages.API_KEY_MISSING
        assert "RESEND_API_KEY" in messages.API_KEY_MISSING
