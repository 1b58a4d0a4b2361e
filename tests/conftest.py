"""Shared pytest fixtures for the full typedenv test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_env_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes `.env` content into the test directory."""

    def _write(name: str, contents: str) -> Path:
        """Write `contents` to `tmp_path / name` and return the path."""

        path = tmp_path / name
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
