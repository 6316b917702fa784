"""Tests for json_error exceptions."""

import pytest

from json_error import serialize_error
from json_error.exceptions import ConfigurationError, DecodeError, ErrorCodecError


class TestErrorCodecError:
    """Tests for base ErrorCodecError class."""

    def test_basic_construction(self):
        error = ErrorCodecError("TEST_CODE", "Test message")

        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_str_without_details(self):
        assert str(ErrorCodecError("TEST_CODE", "Test message")) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        result = str(ErrorCodecError("TEST_CODE", "Test message", details={"foo": "bar"}))
        assert result == "TEST_CODE: Test message (details: {'foo': 'bar'})"

    def test_args_contains_message(self):
        assert "The error message" in ErrorCodecError("CODE", "The error message").args

    def test_to_dict(self):
        error = ErrorCodecError("TEST_CODE", "Test message", details={"key": "value"})
        assert error.to_dict() == {
            "code": "TEST_CODE",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_serializes_with_code_and_message(self):
        """Test that the package's own errors go through the codec cleanly."""
        record = serialize_error(ErrorCodecError("TEST_CODE", "Test message"))
        assert record["type"] == "Error"
        assert record["code"] == "TEST_CODE"
        assert record["message"] == "Test message"


class TestDecodeError:
    """Tests for DecodeError class."""

    def test_default_code(self):
        error = DecodeError("Unrecognized serialized record type: Mystery")
        assert error.code == "UNKNOWN_RECORD_TYPE"
        assert isinstance(error, ErrorCodecError)

    def test_can_be_caught_as_base(self):
        with pytest.raises(ErrorCodecError):
            raise DecodeError("bad", details={"type": "x"})


class TestConfigurationError:
    """Tests for ConfigurationError class."""

    def test_default_code(self):
        error = ConfigurationError("Invalid JSON_ERROR configuration")
        assert error.code == "INVALID_CONFIGURATION"
        assert isinstance(error, ErrorCodecError)

    def test_custom_code(self):
        assert ConfigurationError("bad", code="BAD_PREFIX").code == "BAD_PREFIX"
