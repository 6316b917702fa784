"""Configuration for json_error.

Example:
    from json_error.config import CodecConfig, get_config

    config = get_config()                      # JSON_ERROR_* variables
    strict = CodecConfig(unknown_type_policy="raise")
"""

from json_error.config.env_loader import EnvLoader
from json_error.config.settings import (
    DEFAULT_PREFIX,
    SENSITIVE_FIELDS,
    UNKNOWN_TYPE_POLICIES,
    CodecConfig,
    get_config,
    reset_config,
)

__all__ = [
    "CodecConfig",
    "EnvLoader",
    "DEFAULT_PREFIX",
    "SENSITIVE_FIELDS",
    "UNKNOWN_TYPE_POLICIES",
    "get_config",
    "reset_config",
]
