"""Default `.env` location discovery.

Responsibilities:
- Load the first existing file from an ordered candidate list.
- Load a base file and overlay a local override file when present.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .environment import DotEnv
from .errors import EnvError
from .telemetry.logger import log_event


DEFAULT_CANDIDATES: tuple[str, ...] = (".env.local", ".env", ".env.development")
DEFAULT_BASE_FILE = ".env"
DEFAULT_OVERRIDE_FILE = ".env.local"


def _resolve_directory(directory: str | Path | None) -> Path:
    return Path(directory) if directory is not None else Path.cwd()


def find_default_file(
    directory: str | Path | None = None,
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
) -> Path | None:
    """Return the first candidate that exists as a file in `directory`."""

    root = _resolve_directory(directory)
    for candidate in candidates:
        path = root / candidate
        if path.is_file():
            return path
    return None


def load_default(
    directory: str | Path | None = None,
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
) -> DotEnv:
    """Load the first existing candidate file.

    Args:
        directory: Directory to search; defaults to the working directory.
        candidates: File names tried in order.

    Raises:
        EnvError: `FILE_NOT_FOUND` naming every candidate when none exists.
    """

    path = find_default_file(directory, candidates)
    if path is None:
        log_event("discover", found="none", tried=len(candidates))
        raise EnvError.file_not_found(f"No .env file found in: {', '.join(candidates)}")

    log_event("discover", found=path.name, tried=len(candidates))
    return DotEnv.from_file(path)


def load_with_overrides(
    directory: str | Path | None = None,
    base: str = DEFAULT_BASE_FILE,
    override: str = DEFAULT_OVERRIDE_FILE,
) -> DotEnv:
    """Load `base` and overlay `override` when it exists.

    Raises:
        EnvError: If the base file is missing or either file cannot be read.
    """

    root = _resolve_directory(directory)
    env = DotEnv.from_file(root / base)

    override_path = root / override
    if override_path.is_file():
        env = env.merge(DotEnv.from_file(override_path))
    return env
