"""Exceptions for json_error.

All exceptions include structured error information (code, message, details)
and can themselves be passed through ``serialize_error``.

Usage:
    from json_error.exceptions import ErrorCodecError, DecodeError, ConfigurationError
"""

from json_error.exceptions.base import (
    ConfigurationError,
    DecodeError,
    ErrorCodecError,
)

__all__ = [
    "ErrorCodecError",
    "DecodeError",
    "ConfigurationError",
]
