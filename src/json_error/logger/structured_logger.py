"""
Structured logger with JSON output and file support.

Exceptions passed as keyword extras are not logged with ``str()``: the text
formatter renders them as an indented cause trace and the JSON formatter
embeds a sanitized serialized record, so ``address`` and ``path`` never reach
the log sink.
"""

import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .interface import Logger

# LogRecord attributes that are never treated as extras
_RESERVED_KEYS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName",
})


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_KEYS and key != "session_id"
    }


class JsonFormatter(logging.Formatter):
    """JSON formatter for logging records.

    Exception extras become sanitized serialized records.
    """

    def format(self, record: logging.LogRecord) -> str:
        # Import here to avoid circular imports
        from json_error.codec import serialize_error

        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        session_id = getattr(record, "session_id", None)
        if session_id:
            log_data["session_id"] = str(session_id)

        for key, value in _extra_fields(record).items():
            if isinstance(value, BaseException):
                value = serialize_error(value, sanitize=True)
            log_data[key] = value

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter that appends extra kwargs to the message.

    Exception extras are rendered with ``error_text`` on the lines that
    follow the log line.
    """

    def format(self, record: logging.LogRecord) -> str:
        from json_error.render import error_text

        s = super().format(record)

        traces = []
        extra_args = {}
        for key, value in _extra_fields(record).items():
            if isinstance(value, BaseException):
                extra_args[key] = type(value).__name__
                traces.append(error_text(value))
            else:
                extra_args[key] = value

        if extra_args:
            s += " " + " ".join(f"{k}={v}" for k, v in extra_args.items())
        for trace in traces:
            if trace:
                s += "\n" + "\n".join("  " + line for line in trace.splitlines())

        return s


class StructuredLogger(Logger):
    """Logger implementation on top of the stdlib ``logging`` module.

    Supports:
    - JSON formatting for log aggregation systems
    - Human-readable text formatting for development
    - File output
    - Session tracking across all log entries

    Example:
        logger = StructuredLogger(name="json-error", json_format=True)
        try:
            load()
        except OSError as exc:
            logger.error("Load failed", error=exc)
    """

    def __init__(
        self,
        name: str = "json-error",
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        json_format: bool = False,
    ):
        """Initialize the structured logger.

        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            log_file: Optional file path for log output
            json_format: If True, output logs as JSON; otherwise use text format
        """
        self._name = name
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Clear existing handlers to avoid duplication if re-initialized
        if self._logger.hasHandlers():
            self._logger.handlers.clear()

        self._logger.propagate = False

        if json_format:
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = TextFormatter(
                "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s"
            )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)
            except OSError as e:
                # Fallback to console if file cannot be opened
                print(f"Failed to setup log file {log_file}: {e}", file=sys.stderr)

    @property
    def name(self) -> str:
        return self._name

    def get_session_id(self) -> str:
        return self._session_id

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra: Dict[str, Any] = {"session_id": self._session_id}

        for k, v in kwargs.items():
            if k not in _RESERVED_KEYS:
                extra[k] = v
            else:
                # Prefix reserved keys to preserve them but avoid collision
                extra[f"_{k}"] = v

        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
