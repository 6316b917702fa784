"""Tests for json_error.render."""

import json
import os
from unittest.mock import patch

from json_error import (
    NestedError,
    debug_error,
    debug_serialized_error,
    error_text,
    serialize_error,
    serialized_error_text,
)


class TestSerializedErrorText:
    """Tests for the concise message trace."""

    def test_none_is_empty(self):
        assert serialized_error_text(None) == ""

    def test_plain_error(self):
        assert serialized_error_text({"type": "Error", "message": "sample"}) == "sample"

    def test_message_is_trimmed(self):
        assert serialized_error_text({"type": "Error", "message": "  padded \n"}) == "padded"

    def test_level_indents_first_line(self):
        assert serialized_error_text({"type": "Error", "message": "x"}, level=2) == "    x"

    def test_chain_is_indented_per_level(self):
        record = serialize_error(NestedError("outer", NestedError("middle", Exception("inner"))))
        assert serialized_error_text(record) == "outer\n  middle\n    inner"

    def test_chain_lines_match_messages(self):
        messages = ["a", "b", "c", "d"]
        error = Exception(messages[-1])
        for message in reversed(messages[:-1]):
            error = NestedError(message, error)

        lines = serialized_error_text(serialize_error(error)).split("\n")

        assert lines == [("  " * i) + message for i, message in enumerate(messages)]

    def test_error_type_does_not_follow_nested(self):
        record = {"type": "Error", "message": "a", "nested": {"type": "Error", "message": "b"}}
        assert serialized_error_text(record) == "a"

    def test_missing_message_emits_no_line(self):
        record = serialize_error(NestedError("outer", Exception()))
        assert serialized_error_text(record) == "outer"

    def test_object_is_compact_json(self):
        record = {"type": "Object", "a": 1, "b": [1, 2]}
        assert serialized_error_text(record) == '{"type":"Object","a":1,"b":[1,2]}'

    def test_nested_object_is_indented_json(self):
        record = serialize_error(NestedError("outer", {"k": "v"}))
        lines = serialized_error_text(record).split("\n")
        assert lines[0] == "outer"
        assert lines[1].startswith("  {")
        assert json.loads(lines[1]) == {"k": "v", "type": "Object"}

    def test_default_renders_instance(self):
        assert serialized_error_text({"type": "Default", "instance": 42}) == "42"

    def test_unknown_type_emits_nothing(self):
        assert serialized_error_text({"type": "Mystery", "message": "x"}) == ""

    def test_non_mapping_emits_nothing(self):
        assert serialized_error_text("text") == ""

    def test_depth_limit_truncates(self):
        record = {
            "type": "NestedError",
            "message": "a",
            "nested": {
                "type": "NestedError",
                "message": "b",
                "nested": {"type": "Error", "message": "c"},
            },
        }
        with patch.dict(os.environ, {"JSON_ERROR_MAX_DEPTH": "1"}):
            text = serialized_error_text(record)
        assert text == "a\n  b"


class TestErrorText:
    """Tests for error_text."""

    def test_plain_error(self):
        assert error_text(Exception("sample")) == "sample"

    def test_none(self):
        assert error_text(None) == ""

    def test_native_chain(self):
        try:
            try:
                raise KeyError("k")
            except KeyError as exc:
                raise RuntimeError("wrapped") from exc
        except RuntimeError as err:
            text = error_text(err)
        assert text == "wrapped\n  'k'"


class TestDebugSerializedError:
    """Tests for the field-by-field debug dump."""

    def test_none_is_empty(self):
        assert debug_serialized_error(None) == ""

    def test_record_without_type(self):
        assert debug_serialized_error({"message": "sample"}) == "message: sample"

    def test_fields_follow_allow_list_order(self):
        record = {"type": "Error", "message": "m", "code": "E1", "port": 80}
        assert debug_serialized_error(record) == "code: E1\nmessage: m\nport: 80"

    def test_chain_is_root_first(self):
        record = {
            "type": "NestedError",
            "message": "outer",
            "code": "E1",
            "nested": {"type": "Error", "message": "inner"},
        }
        assert debug_serialized_error(record) == "code: E1\nmessage: outer\nmessage: inner"

    def test_unlisted_fields_are_skipped(self):
        record = {"type": "Object", "message": "m", "other": 1}
        assert debug_serialized_error(record) == "message: m"

    def test_error_type_does_not_follow_nested(self):
        record = {"type": "Error", "message": "a", "nested": {"type": "Error", "message": "b"}}
        assert debug_serialized_error(record) == "message: a"

    def test_custom_fields(self):
        record = {"type": "Error", "message": "m", "code": "E1"}
        assert debug_serialized_error(record, fields=["message"]) == "message: m"

    def test_depth_limit_truncates(self):
        record = {
            "type": "NestedError",
            "message": "a",
            "nested": {
                "type": "NestedError",
                "message": "b",
                "nested": {"type": "Error", "message": "c"},
            },
        }
        with patch.dict(os.environ, {"JSON_ERROR_MAX_DEPTH": "1"}):
            text = debug_serialized_error(record, fields=["message"])
        assert text == "message: a\nmessage: b"


class TestDebugError:
    """Tests for debug_error."""

    def test_contains_message_and_stack(self):
        text = debug_error(Exception("sample"))
        assert "message: sample" in text
        assert "stack: Exception: sample" in text

    def test_none(self):
        assert debug_error(None) == ""

    def test_os_error(self):
        text = debug_error(FileNotFoundError(2, "No such file or directory", "/tmp/x"))
        lines = text.split("\n")
        assert "code: ENOENT" in lines
        assert "errno: 2" in lines
        assert "path: /tmp/x" in lines
