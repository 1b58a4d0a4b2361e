"""Typed configuration objects built from parsed environments.

Responsibilities:
- Define the contract for user configuration types populated from a `DotEnv`.
- Provide loader entry points for files, merged files, text, and prebuilt envs.

Key types:
- `EnvSettings`: base class for configuration types.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class DatabaseSettings(EnvSettings):
    ...     host: str
    ...     port: int
    ...
    ...     @classmethod
    ...     def from_env(cls, env):
    ...         return cls(host=env.require("DB_HOST"), port=env.get("DB_PORT", int, 5432))
    >>> DatabaseSettings.load_text("DB_HOST=db").port
    5432
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TypeVar

from .environment import DotEnv


SettingsT = TypeVar("SettingsT", bound="EnvSettings")


class EnvSettings:
    """Interface for configuration types constructed from a `DotEnv`."""

    @classmethod
    def from_env(cls: type[SettingsT], env: DotEnv) -> SettingsT:
        """Build an instance from `env`, letting `require` errors propagate."""

        raise NotImplementedError

    @classmethod
    def load_env(cls: type[SettingsT], env: DotEnv) -> SettingsT:
        return cls.from_env(env)

    @classmethod
    def load_file(cls: type[SettingsT], path: str | Path) -> SettingsT:
        """Load settings from one `.env` file."""

        return cls.from_env(DotEnv.from_file(path))

    @classmethod
    def load_files(cls: type[SettingsT], paths: Iterable[str | Path]) -> SettingsT:
        """Load settings from several files; later files override earlier ones."""

        return cls.from_env(DotEnv.merged_from(paths))

    @classmethod
    def load_text(cls: type[SettingsT], contents: str) -> SettingsT:
        return cls.from_env(DotEnv.from_text(contents))
