"""Human-readable text for serialized errors.

Two forms are produced from a record:

- ``serialized_error_text``: one line per message, each cause indented two
  spaces deeper than the error it caused.
- ``debug_serialized_error``: every allow-listed field as ``name: value``,
  root of the chain first.

Neither renderer raises for a malformed record; nodes with an unrecognized
``type`` produce no text.
"""

import json
from typing import Any, Iterable, List, Mapping

from json_error.codec import DEFAULT_FIELDS, ErrorKind, get_codec, serialize_error

INDENT = "  "


def serialized_error_text(record: Any, level: int = 0) -> str:
    """Render a record as an indented message trace.

    Args:
        record: Serialized record, or None
        level: Indentation level of the first line

    Returns:
        Newline-joined lines without a trailing newline; empty for None.
    """
    if record is None:
        return ""
    lines: List[str] = []
    _text_lines(record, level, 0, lines)
    return "\n".join(lines)


def _text_lines(record: Any, level: int, depth: int, lines: List[str]) -> None:
    if not isinstance(record, Mapping):
        return

    indent = INDENT * level
    record_type = record.get("type")

    if record_type in (ErrorKind.NESTED, ErrorKind.ERROR):
        message = record.get("message")
        if message:
            text = str(message).strip()
            if text:
                lines.append(indent + text)
        nested = record.get("nested")
        if record_type == ErrorKind.NESTED and nested is not None:
            codec = get_codec()
            if depth >= codec.max_depth:
                codec.logger.warning(
                    "Serialized chain exceeds maximum depth, text truncated",
                    max_depth=codec.max_depth,
                )
                return
            _text_lines(nested, level + 1, depth + 1, lines)
    elif record_type == ErrorKind.OBJECT:
        lines.append(indent + json.dumps(dict(record), separators=(",", ":"), default=str))
    elif record_type == ErrorKind.DEFAULT:
        lines.append(indent + str(record.get("instance")))


def error_text(error: Any) -> str:
    """Serialize an error and render its message trace."""
    return serialized_error_text(serialize_error(error))


def debug_serialized_error(record: Any, fields: Iterable[str] = DEFAULT_FIELDS) -> str:
    """Dump every allow-listed field of every record in the chain.

    Records are visited root to leaf; within a record, fields follow the
    allow-list order. Each present field becomes one ``name: value`` line.
    """
    if record is None:
        return ""

    fields = tuple(fields)
    codec = get_codec()
    lines: List[str] = []
    node = record
    depth = 0

    while isinstance(node, Mapping):
        for name in fields:
            value = node.get(name)
            if value is not None:
                lines.append(f"{name}: {value}")

        if node.get("type") != ErrorKind.NESTED:
            break
        node = node.get("nested")
        depth += 1
        if node is not None and depth > codec.max_depth:
            codec.logger.warning(
                "Serialized chain exceeds maximum depth, debug output truncated",
                max_depth=codec.max_depth,
            )
            break

    return "\n".join(lines)


def debug_error(error: Any) -> str:
    """Serialize an error and dump its fields."""
    return debug_serialized_error(serialize_error(error))
