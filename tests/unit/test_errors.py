"""Unit tests for tagged error rendering."""

from typedenv.errors import EnvError, ErrorKind


def test_file_not_found_renders_path() -> None:
    error = EnvError.file_not_found("/srv/app/.env")

    assert error.kind is ErrorKind.FILE_NOT_FOUND
    assert error.path == "/srv/app/.env"
    assert error.key is None
    assert str(error) == "Environment file not found: /srv/app/.env"


def test_read_error_keeps_underlying_cause() -> None:
    """Read errors should preserve the original exception for diagnostics."""

    cause = PermissionError(13, "Permission denied")
    error = EnvError.read_error("/srv/app/.env", cause)

    assert error.kind is ErrorKind.READ_ERROR
    assert error.cause is cause
    assert str(error).startswith("Failed to read '/srv/app/.env': ")
    assert "Permission denied" in str(error)


def test_invalid_value_and_missing_key_render_context() -> None:
    invalid = EnvError.invalid_value("DEBUG", "maybe", "bool")
    missing = EnvError.missing_key("PORT")

    assert str(invalid) == "Cannot convert 'maybe' to bool for key 'DEBUG'"
    assert str(missing) == "Missing required environment variable: PORT"
    assert isinstance(invalid, RuntimeError)
