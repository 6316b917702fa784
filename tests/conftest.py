"""Shared fixtures for json_error tests."""

from typing import Any, List, Tuple

import pytest

from json_error.codec import reset_codec
from json_error.config import reset_config
from json_error.logger import Logger


class ListLogger(Logger):
    """Logger that keeps records in memory for assertions."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, **kwargs)

    def get_session_id(self) -> str:
        return "test-session"

    def messages(self, level: str = "WARNING") -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture(autouse=True)
def fresh_codec():
    """Rebuild configuration and the default codec for every test."""
    reset_config()
    reset_codec()
    yield
    reset_config()
    reset_codec()


@pytest.fixture
def list_logger() -> ListLogger:
    return ListLogger()
