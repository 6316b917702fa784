"""Exception classes raised by json_error.

The codec itself never raises for the shape of its input. These exceptions
cover the two places that can fail:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class ErrorCodecError(Exception):
    """Base exception for all json_error errors.

    Attributes:
        code: Machine-readable error code (e.g., "UNKNOWN_RECORD_TYPE")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class DecodeError(ErrorCodecError):
    """A serialized record could not be turned back into a value.

    Only raised when the codec runs with ``unknown_type_policy="raise"``.
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_RECORD_TYPE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


class ConfigurationError(ErrorCodecError):
    """Codec configuration is invalid."""

    def __init__(
        self,
        message: str,
        code: str = "INVALID_CONFIGURATION",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)
