"""Filesystem access for `.env` sources."""

from __future__ import annotations

from pathlib import Path

from .errors import EnvError
from .telemetry.logger import log_event


def read_env_file(path: str | Path) -> str:
    """Return the UTF-8 text of a `.env` file.

    Raises:
        EnvError: `FILE_NOT_FOUND` when `path` is not an existing file,
            `READ_ERROR` when it cannot be read or decoded.
    """

    file_path = Path(path)
    if not file_path.is_file():
        raise EnvError.file_not_found(file_path)

    try:
        contents = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvError.read_error(file_path, exc) from exc

    log_event("file_read", path=file_path, chars=len(contents))
    return contents
