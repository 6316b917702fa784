"""Error codec: exceptions to JSON-safe records and back.

A serialized record is a plain ``dict`` with a ``type`` discriminator:

- ``"NestedError"``: an exception with a cause; the cause is serialized
  recursively under ``nested``.
- ``"Error"``: an exception without a cause.
- ``"Object"``: a structured non-exception value; its own fields are copied
  verbatim.
- ``"Default"``: anything else, kept as-is under ``instance``.

Only names in the field allow-list are projected out of exceptions and back
onto restored ones. Subclass identity is not restored: records come back as
``NestedError`` or ``Exception``.

Example:
    record = serialize_error(exc, sanitize=True)
    payload = json.dumps(record)
    restored = deserialize_error(json.loads(payload))
"""

from __future__ import annotations

import dataclasses
import errno
import json
import traceback
from enum import Enum
from types import ModuleType
from typing import Any, Dict, Iterable, Mapping, Optional, Set, Tuple

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from json_error.config import CodecConfig, get_config
from json_error.exceptions import DecodeError
from json_error.logger import Logger, create_logger
from json_error.nested import NestedError

SerializedRecord = Dict[str, Any]

CODEC_LOGGER_NAME = "json-error-codec"

DEFAULT_FIELDS: Tuple[str, ...] = (
    "stackTraceLimit",
    "cause",
    "code",
    "message",
    "stack",
    "address",
    "dest",
    "errno",
    "info",
    "path",
    "port",
    "syscall",
    "opensslErrorStack",
    "function",
    "library",
    "reason",
)


class ErrorKind(str, Enum):
    """Variant of a serializable value; the value is the wire ``type``."""

    NESTED = "NestedError"
    ERROR = "Error"
    OBJECT = "Object"
    DEFAULT = "Default"


def _chained_cause(error: BaseException) -> Any:
    nested = _read_attribute(error, "nested")
    if nested is not None:
        return nested
    return error.__cause__


def _is_plain_object(value: Any) -> bool:
    if isinstance(value, (Mapping, BaseModel)):
        return True
    if isinstance(value, (type, ModuleType)) or callable(value):
        return False
    if dataclasses.is_dataclass(value):
        return True
    return hasattr(value, "__dict__")


def classify_error(value: Any) -> ErrorKind:
    """Classify a value into the variant used for its record.

    Exceptions with a cause (a ``nested`` attribute or an explicit
    ``__cause__``) and every ``NestedError`` are NESTED; other exceptions are
    ERROR; mappings, pydantic models, dataclass instances and plain objects
    are OBJECT; everything else is DEFAULT.
    """
    if isinstance(value, BaseException):
        if isinstance(value, NestedError) or _chained_cause(value) is not None:
            return ErrorKind.NESTED
        return ErrorKind.ERROR
    if _is_plain_object(value):
        return ErrorKind.OBJECT
    return ErrorKind.DEFAULT


def _format_stack(error: BaseException) -> str:
    if error.__traceback__ is not None:
        lines = traceback.format_exception(
            type(error), error, error.__traceback__, chain=False
        )
    else:
        lines = traceback.format_exception_only(type(error), error)
    return "".join(lines).rstrip("\n")


def _derived_field(error: BaseException, name: str) -> Any:
    """Python equivalents for allow-listed names the exception lacks."""
    if name == "message":
        return str(error)
    if name == "stack":
        return _format_stack(error)
    if isinstance(error, OSError):
        if name == "code" and error.errno is not None:
            return errno.errorcode.get(error.errno)
        if name == "path":
            return error.filename
        if name == "dest":
            return error.filename2
    return None


def _read_attribute(value: Any, name: str) -> Any:
    try:
        return getattr(value, name, None)
    except Exception:
        # A getter that fails leaves the field undefined
        return None


def _read_field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        result = value.get(name)
    else:
        result = _read_attribute(value, name)
    if result is None and isinstance(value, BaseException):
        result = _derived_field(value, name)
    return result


def _own_fields(value: Any) -> Dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        try:
            return value.model_dump()
        except PydanticSerializationError:
            return _public_attributes(value)
    if dataclasses.is_dataclass(value):
        return {f.name: _read_attribute(value, f.name) for f in dataclasses.fields(value)}
    return _public_attributes(value)


def _public_attributes(value: Any) -> Dict[str, Any]:
    return {k: v for k, v in vars(value).items() if not k.startswith("_")}


def _restore_fields(record: Mapping[str, Any], target: BaseException, fields: Iterable[str]) -> None:
    for name in fields:
        value = record.get(name)
        if value is not None:
            setattr(target, name, value)


_codec_logger: Optional[Logger] = None


def _default_logger() -> Logger:
    """Logger shared by codecs built without one.

    Uses its own name so building it never touches handlers an application
    installed on the "json-error" logger.
    """
    global _codec_logger
    if _codec_logger is None:
        _codec_logger = create_logger(name=CODEC_LOGGER_NAME)
    return _codec_logger


def _record_kind(record: Any) -> Optional[ErrorKind]:
    if not isinstance(record, Mapping):
        return None
    try:
        return ErrorKind(record.get("type"))
    except ValueError:
        return None


class ErrorCodec:
    """Serialize exceptions to JSON-safe records and restore them.

    Holds the configuration that applies across calls (sensitive field
    names, chain depth limit, unknown type policy) and the logger used for
    warnings about cut chains and unrecognized records.

    Example:
        codec = ErrorCodec(CodecConfig(unknown_type_policy="raise"))
        record = codec.serialize(exc, sanitize=True)
        restored = codec.deserialize(record)
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration (defaults to ``get_config()``)
            logger: Optional logger instance. Creates one if not provided.
        """
        self.config = config or get_config()
        self.logger = logger or _default_logger()

    @property
    def max_depth(self) -> int:
        return self.config.max_depth

    def serialize(
        self,
        error: Any,
        sanitize: bool = False,
        fields: Iterable[str] = DEFAULT_FIELDS,
    ) -> Optional[SerializedRecord]:
        """Serialize an exception (or any value) into a JSON-safe record.

        Args:
            error: Exception, structured object or arbitrary value. ``None``
                is returned unchanged.
            sanitize: Drop the sensitive fields (``address`` and ``path`` by
                default) from every exception record in the chain. Verbatim
                ``Object`` fields are not filtered.
            fields: Allow-list of field names to project

        Returns:
            The serialized record, or None for None input.
        """
        if error is None:
            return None
        active = tuple(fields)
        if sanitize:
            active = tuple(name for name in active if name not in self.config.sensitive_fields)
        return self._serialize(error, active, 0, set())

    def _serialize(
        self,
        error: Any,
        fields: Tuple[str, ...],
        depth: int,
        seen: Set[int],
    ) -> SerializedRecord:
        seen.add(id(error))
        record: SerializedRecord = {}

        for name in fields:
            value = _read_field(error, name)
            if value is not None:
                record[name] = value

        kind = classify_error(error)
        if kind is ErrorKind.NESTED:
            cause = _chained_cause(error)
            if cause is not None and self._can_follow(cause, depth, seen, error):
                record["nested"] = self._serialize(cause, fields, depth + 1, seen)
        elif kind is ErrorKind.OBJECT:
            record.update(_own_fields(error))
        elif kind is ErrorKind.DEFAULT:
            record["instance"] = error

        # Written last so a verbatim "type" field cannot replace the discriminator
        record["type"] = kind.value
        return record

    def _can_follow(self, cause: Any, depth: int, seen: Set[int], error: BaseException) -> bool:
        if id(cause) in seen:
            self.logger.warning(
                "Cause chain loops back on itself, cutting chain",
                depth=depth,
                error_type=type(error).__name__,
            )
            return False
        if depth >= self.max_depth:
            self.logger.warning(
                "Cause chain exceeds maximum depth, cutting chain",
                max_depth=self.max_depth,
            )
            return False
        return True

    def deserialize(
        self,
        record: Any,
        fields: Iterable[str] = DEFAULT_FIELDS,
    ) -> Any:
        """Rebuild a value from a serialized record.

        ``NestedError`` records become ``NestedError`` instances, ``Error``
        records become ``Exception`` instances, ``Object`` records come back
        as a shallow ``dict`` copy (including ``type``) and ``Default``
        records return their ``instance``.

        Raises:
            DecodeError: If the record type is not recognized and the codec
                is configured with ``unknown_type_policy="raise"``.
        """
        if record is None:
            return None
        return self._deserialize(record, tuple(fields), 0)

    def _deserialize(self, record: Any, fields: Tuple[str, ...], depth: int) -> Any:
        kind = _record_kind(record)

        if kind is ErrorKind.NESTED:
            chained = NestedError(record.get("message") or "")
            _restore_fields(record, chained, fields)
            nested = record.get("nested")
            if nested is not None:
                if depth >= self.max_depth:
                    self.logger.warning(
                        "Serialized chain exceeds maximum depth, cutting chain",
                        max_depth=self.max_depth,
                    )
                else:
                    chained.nested = self._deserialize(nested, fields, depth + 1)
            return chained

        if kind is ErrorKind.ERROR:
            message = record.get("message")
            result = Exception(message) if message is not None else Exception()
            _restore_fields(record, result, fields)
            return result

        if kind is ErrorKind.OBJECT:
            return dict(record)

        if kind is ErrorKind.DEFAULT:
            return record.get("instance")

        return self._unknown_record(record)

    def _unknown_record(self, record: Any) -> Any:
        if isinstance(record, Mapping):
            record_type = str(record.get("type"))
        else:
            record_type = type(record).__name__

        if self.config.raise_on_unknown_type:
            raise DecodeError(
                f"Unrecognized serialized record type: {record_type}",
                details={"type": record_type},
            )

        self.logger.warning(
            "Unrecognized serialized record type, returning record unchanged",
            record_type=record_type,
        )
        return record

    def to_json(
        self,
        error: Any,
        sanitize: bool = False,
        indent: Optional[int] = None,
    ) -> str:
        """Serialize an error straight to JSON text.

        Values inside the record that JSON cannot encode natively are
        converted: exceptions become nested records, pydantic models are
        dumped, objects use their attributes, anything else uses ``str()``.
        """

        def default(obj: Any) -> Any:
            if isinstance(obj, BaseException):
                return self.serialize(obj, sanitize=sanitize)
            if isinstance(obj, BaseModel):
                return _own_fields(obj)
            if hasattr(obj, "__dict__"):
                return _public_attributes(obj)
            return str(obj)

        return json.dumps(self.serialize(error, sanitize=sanitize), indent=indent, default=default)

    def from_json(self, text: str) -> Any:
        """Parse JSON text produced by ``to_json`` and deserialize it."""
        return self.deserialize(json.loads(text))


_default_codec: Optional[ErrorCodec] = None


def get_codec() -> ErrorCodec:
    """Get the process-wide codec built from ``get_config()``."""
    global _default_codec
    if _default_codec is None:
        _default_codec = ErrorCodec()
    return _default_codec


def reset_codec() -> None:
    """Drop the process-wide codec so the next call rebuilds it (primarily for testing)."""
    global _default_codec
    _default_codec = None


def serialize_error(
    error: Any,
    sanitize: bool = False,
    fields: Iterable[str] = DEFAULT_FIELDS,
) -> Optional[SerializedRecord]:
    """Serialize an exception into a JSON-safe record. See ``ErrorCodec.serialize``."""
    return get_codec().serialize(error, sanitize=sanitize, fields=fields)


def deserialize_error(record: Any, fields: Iterable[str] = DEFAULT_FIELDS) -> Any:
    """Rebuild a value from a serialized record. See ``ErrorCodec.deserialize``."""
    return get_codec().deserialize(record, fields=fields)


def error_to_json(error: Any, sanitize: bool = False, indent: Optional[int] = None) -> str:
    return get_codec().to_json(error, sanitize=sanitize, indent=indent)


def error_from_json(text: str) -> Any:
    return get_codec().from_json(text)
