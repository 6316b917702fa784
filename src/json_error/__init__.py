"""json_error - Exceptions to JSON-safe records and back.

This package provides:
- codec: serialize_error / deserialize_error, preserving cause chains and
  an allow-list of diagnostic fields, with an optional sanitize mode
- render: a short indented message trace and a field-by-field debug dump
- nested: NestedError, the chained exception type restored from records
- config: CodecConfig loaded from JSON_ERROR_* environment variables
- logger: structured logging that renders exceptions through the codec
- exceptions: structured exception classes raised by the package
"""

__version__ = "1.0.0"

from json_error.codec import (
    DEFAULT_FIELDS,
    ErrorCodec,
    ErrorKind,
    SerializedRecord,
    classify_error,
    deserialize_error,
    error_from_json,
    error_to_json,
    get_codec,
    reset_codec,
    serialize_error,
)
from json_error.config import SENSITIVE_FIELDS, CodecConfig, get_config, reset_config
from json_error.exceptions import ConfigurationError, DecodeError, ErrorCodecError
from json_error.logger import Logger, StructuredLogger, create_logger, get_logger
from json_error.nested import NestedError
from json_error.render import (
    debug_error,
    debug_serialized_error,
    error_text,
    serialized_error_text,
)

__all__ = [
    "__version__",
    # Codec
    "DEFAULT_FIELDS",
    "SENSITIVE_FIELDS",
    "ErrorCodec",
    "ErrorKind",
    "SerializedRecord",
    "classify_error",
    "serialize_error",
    "deserialize_error",
    "error_to_json",
    "error_from_json",
    "get_codec",
    "reset_codec",
    # Rendering
    "serialized_error_text",
    "error_text",
    "debug_serialized_error",
    "debug_error",
    # Types
    "NestedError",
    # Config
    "CodecConfig",
    "get_config",
    "reset_config",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "ErrorCodecError",
    "DecodeError",
    "ConfigurationError",
]
