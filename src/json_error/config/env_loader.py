"""Environment loader with optional .env support.

Values are merged in this order, later sources winning:
1) .env file (if provided and exists)
2) OS environment variables
3) Explicit overrides

With a prefix, only ``{PREFIX}_*`` keys are returned, with the prefix
stripped, so ``JSON_ERROR_MAX_DEPTH`` comes back as ``MAX_DEPTH``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values


class EnvLoader:
    """Collect environment-style key/value pairs for codec configuration."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    def _merged(self, overrides: Optional[Mapping[str, object]]) -> Dict[str, str]:
        data: Dict[str, str] = {}

        env_path = self.env_file or Path.cwd() / ".env"
        if env_path.exists():
            data.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})

        data.update(os.environ)

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data

    def load(
        self,
        overrides: Optional[Mapping[str, object]] = None,
        prefix: Optional[str] = None,
    ) -> Dict[str, str]:
        """Load merged values, optionally narrowed to one prefix.

        Args:
            overrides: Values taking precedence over file and environment
            prefix: Keep only ``{prefix}_*`` keys and strip the prefix

        Returns:
            Mapping of keys to string values
        """
        data = self._merged(overrides)
        if prefix is None:
            return data

        head = prefix.rstrip("_") + "_"
        return {key[len(head):]: value for key, value in data.items() if key.startswith(head)}


__all__ = ["EnvLoader"]
