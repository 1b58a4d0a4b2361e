"""Unit tests for copying parsed values into the process environment."""

from __future__ import annotations

import os

import pytest

from typedenv.environment import DotEnv
from typedenv.process_env import load_into_process_environment


def test_load_keeps_existing_variables_without_overwrite() -> None:
    """Variables that are already set should win when `overwrite` is off."""

    environ = {"HOST": "from-process"}
    env = DotEnv({"HOST": "from-file", "PORT": "8080"})

    written = load_into_process_environment(env, environ=environ)

    assert written == ["PORT"]
    assert environ == {"HOST": "from-process", "PORT": "8080"}


def test_load_replaces_existing_variables_with_overwrite() -> None:
    environ = {"HOST": "from-process"}
    env = DotEnv({"HOST": "from-file", "PORT": "8080"})

    written = load_into_process_environment(env, overwrite=True, environ=environ)

    assert sorted(written) == ["HOST", "PORT"]
    assert environ == {"HOST": "from-file", "PORT": "8080"}


def test_load_defaults_to_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit target the real process environment is updated."""

    monkeypatch.delenv("TYPEDENV_TEST_VALUE", raising=False)
    monkeypatch.setenv("TYPEDENV_TEST_KEPT", "original")
    env = DotEnv({"TYPEDENV_TEST_VALUE": "loaded", "TYPEDENV_TEST_KEPT": "replacement"})

    try:
        load_into_process_environment(env)

        assert os.environ["TYPEDENV_TEST_VALUE"] == "loaded"
        assert os.environ["TYPEDENV_TEST_KEPT"] == "original"
    finally:
        os.environ.pop("TYPEDENV_TEST_VALUE", None)
