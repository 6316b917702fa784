"""Codec configuration.

``CodecConfig`` holds the knobs that are not part of a single call: which
field names count as sensitive, how deep a cause chain may go, and what to do
with a record whose ``type`` is not recognized. Values come from environment
variables with a project prefix (default ``JSON_ERROR``).
"""

from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from json_error.config.env_loader import EnvLoader
from json_error.exceptions import ConfigurationError

DEFAULT_PREFIX = "JSON_ERROR"

UNKNOWN_TYPE_POLICIES = ("passthrough", "raise")

# Privacy-sensitive names removed from the allow-list in sanitize mode
SENSITIVE_FIELDS: Tuple[str, ...] = ("address", "path")


class CodecConfig(BaseModel):
    """Serialization settings with environment variable overrides."""

    sensitive_fields: Tuple[str, ...] = Field(
        default=SENSITIVE_FIELDS,
        description="Field names dropped from the top-level record when sanitizing",
    )
    max_depth: int = Field(
        default=64,
        description="Maximum number of chained causes followed before the chain is cut",
        ge=1,
    )
    unknown_type_policy: str = Field(
        default="passthrough",
        description="Deserialize behaviour for unrecognized types: passthrough or raise",
    )

    model_config = {"frozen": True}

    @field_validator("sensitive_fields", mode="before")
    @classmethod
    def split_sensitive_fields(cls, v):
        """Accept a comma-separated string as well as a sequence"""
        if isinstance(v, str):
            return tuple(name.strip() for name in v.split(",") if name.strip())
        return v

    @field_validator("unknown_type_policy")
    @classmethod
    def validate_unknown_type_policy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in UNKNOWN_TYPE_POLICIES:
            raise ValueError(
                f"unknown_type_policy must be one of: {', '.join(UNKNOWN_TYPE_POLICIES)}"
            )
        return v

    @property
    def raise_on_unknown_type(self) -> bool:
        return self.unknown_type_policy == "raise"

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env_file: Optional[Path] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ) -> "CodecConfig":
        """Create configuration from environment variables

        Args:
            prefix: Environment variable prefix (e.g., JSON_ERROR)
            env_file: Optional .env file (defaults to ./.env when present)
            overrides: Explicit values taking precedence over the environment

        Environment variables:
            {prefix}_SANITIZE_FIELDS: Comma-separated sensitive field names
            {prefix}_MAX_DEPTH: Maximum chain depth
            {prefix}_UNKNOWN_TYPE_POLICY: passthrough or raise

        Raises:
            ConfigurationError: If any value fails validation
        """
        prefix = prefix.rstrip("_")
        env_data = EnvLoader(env_file).load(overrides, prefix=prefix)

        values: Dict[str, str] = {}
        for name, key in (
            ("sensitive_fields", "SANITIZE_FIELDS"),
            ("max_depth", "MAX_DEPTH"),
            ("unknown_type_policy", "UNKNOWN_TYPE_POLICY"),
        ):
            raw = env_data.get(key)
            if raw is not None:
                values[name] = raw

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid {prefix} configuration",
                details={"errors": [str(e["msg"]) for e in exc.errors()]},
            ) from exc


# Cached configuration per prefix
_global_configs: Dict[str, CodecConfig] = {}


def get_config(prefix: str = DEFAULT_PREFIX, reload: bool = False) -> CodecConfig:
    """Get or create the configuration for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload configuration from the environment
    """
    if prefix not in _global_configs or reload:
        _global_configs[prefix] = CodecConfig.from_env(prefix=prefix)
    return _global_configs[prefix]


def reset_config(prefix: Optional[str] = None) -> None:
    """Reset cached configuration (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_configs.pop(prefix, None)
    else:
        _global_configs.clear()
