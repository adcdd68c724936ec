"""Error handling for the Aramex client.

This package provides:
- ErrorKind, the closed set of failure kinds, and its A-XXXX registry
- AramexError, the single tagged exception type
- Formatting helpers for errors and Aramex notifications

Error categories:
- A-1xxx: Configuration errors
- A-2xxx: Binding and dispatch errors
- A-3xxx: Transport errors
- A-4xxx: Remote business errors
- A-5xxx: Argument validation errors
"""

from aramex.errors.formatter import format_error, format_notifications
from aramex.errors.registry import (
    ERROR_REGISTRY,
    ErrorCode,
    ErrorKind,
    get_error,
    get_error_by_code,
)
from aramex.errors.types import AramexError

__all__ = [
    # Registry
    "ErrorKind",
    "ErrorCode",
    "ERROR_REGISTRY",
    "get_error",
    "get_error_by_code",
    # Exception
    "AramexError",
    # Formatter
    "format_error",
    "format_notifications",
]
