"""Basic tests for json_error package."""


def test_import_json_error():
    """Test that json_error can be imported."""
    import json_error

    assert hasattr(json_error, "__version__")
    assert json_error.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import json_error

    parts = json_error.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api():
    import json_error

    for name in (
        "serialize_error",
        "deserialize_error",
        "serialized_error_text",
        "error_text",
        "debug_serialized_error",
        "debug_error",
    ):
        assert callable(getattr(json_error, name))
        assert name in json_error.__all__


def test_default_fields_order():
    from json_error import DEFAULT_FIELDS

    assert DEFAULT_FIELDS == (
        "stackTraceLimit", "cause", "code", "message", "stack", "address",
        "dest", "errno", "info", "path", "port", "syscall", "opensslErrorStack",
        "function", "library", "reason",
    )
