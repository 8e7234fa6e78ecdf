"""JSON output utilities for resend-cli."""

from __future__ import annotations

import sys

import msgspec

__all__ = [
    "ErrorResponse",
    "ErrorData",
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "encode_json",
]


class ErrorData(msgspec.Struct, frozen=True, omit_defaults=True):
    """Error payload: message plus an optional category."""

    message: str
    category: str | None = None


class ErrorResponse(msgspec.Struct, frozen=True):
    """Envelope for errors in JSON mode: ``{"error": {"message": ...}}``."""

    error: ErrorData


def encode_json(data: object, indent: int = 2) -> bytes:
    """Encode data as pretty-printed JSON bytes.

    Args:
        data: Any msgspec-serializable object (Struct, dict, list, etc.)
        indent: Number of spaces for indentation
    """
    return msgspec.json.format(msgspec.json.encode(data), indent=indent)


def output_json(data: object) -> None:
    """Output data as compact JSON to stdout."""
    sys.stdout.write(msgspec.json.encode(data).decode())
    sys.stdout.write("\n")


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout."""
    sys.stdout.write(encode_json(data, indent=indent).decode())
    sys.stdout.write("\n")


def output_json_error(message: str, category: str | None = None) -> None:
    """Write an error envelope to stderr.

    Args:
        message: Human-readable error message
        category: Error category (e.g., "validation", "not_found")
    """
    response = ErrorResponse(error=ErrorData(message=message, category=category))
    sys.stderr.write(encode_json(response).decode())
    sys.stderr.write("\n")
