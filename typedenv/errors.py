"""Error taxonomy for loading and typed access diagnostics.

Every failure surfaced by the library is an `EnvError` tagged with an
`ErrorKind`. The tag selects which context fields are populated and how the
diagnostic message is rendered.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Tag identifying which failure an `EnvError` describes."""

    FILE_NOT_FOUND = "file_not_found"
    MISSING_KEY = "missing_key"
    INVALID_VALUE = "invalid_value"
    READ_ERROR = "read_error"


class EnvError(RuntimeError):
    """Raised when a file cannot be loaded or a required value cannot be produced."""

    def __init__(
        self,
        *,
        kind: ErrorKind,
        path: str | None = None,
        key: str | None = None,
        value: str | None = None,
        expected_type: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize a tagged error with the context fields its kind uses."""

        self.kind = kind
        self.path = path
        self.key = key
        self.value = value
        self.expected_type = expected_type
        self.cause = cause
        super().__init__(self._render())

    @classmethod
    def file_not_found(cls, path: str | Path) -> EnvError:
        return cls(kind=ErrorKind.FILE_NOT_FOUND, path=str(path))

    @classmethod
    def missing_key(cls, key: str) -> EnvError:
        return cls(kind=ErrorKind.MISSING_KEY, key=key)

    @classmethod
    def invalid_value(cls, key: str, value: str, expected_type: str) -> EnvError:
        return cls(
            kind=ErrorKind.INVALID_VALUE,
            key=key,
            value=value,
            expected_type=expected_type,
        )

    @classmethod
    def read_error(cls, path: str | Path, cause: BaseException) -> EnvError:
        return cls(kind=ErrorKind.READ_ERROR, path=str(path), cause=cause)

    def _render(self) -> str:
        """Build the human-readable diagnostic for this error kind."""

        if self.kind is ErrorKind.FILE_NOT_FOUND:
            return f"Environment file not found: {self.path}"
        if self.kind is ErrorKind.MISSING_KEY:
            return f"Missing required environment variable: {self.key}"
        if self.kind is ErrorKind.INVALID_VALUE:
            return (
                f"Cannot convert '{self.value}' to {self.expected_type} "
                f"for key '{self.key}'"
            )
        return f"Failed to read '{self.path}': {self.cause}"
