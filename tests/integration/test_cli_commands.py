"""CLI integration tests for show, get, and check commands."""

from __future__ import annotations

import os
from pathlib import Path
import subprocess
import sys
from typing import Callable

import pytest
from typer.testing import CliRunner

from typedenv.cli import app

SAMPLE = """
# service settings
HOST=localhost
PORT=8080
DEBUG=yes
API_KEY=abc123
DATABASE_URL="postgres://localhost/mydb"
BROKEN=not_a_number
"""


@pytest.fixture
def sample_env_file(write_env_file: Callable[[str, str], Path]) -> Path:
    """Write the shared sample `.env` file."""

    return write_env_file(".env", SAMPLE)


def test_show_masks_sensitive_values(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--file", str(sample_env_file)])

    assert result.exit_code == 0, result.output
    assert "    API_KEY: ***" in result.output
    assert "    HOST: localhost" in result.output
    assert "abc123" not in result.output
    assert f"  source: {sample_env_file.absolute()}" in result.output


def test_show_reveal_prints_sensitive_values(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--file", str(sample_env_file), "--reveal"])

    assert result.exit_code == 0, result.output
    assert "    API_KEY: abc123" in result.output


def test_show_discovers_default_file(
    sample_env_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(sample_env_file.parent)
    runner = CliRunner()

    result = runner.invoke(app, ["show"])

    assert result.exit_code == 0, result.output
    assert "    PORT: 8080" in result.output


def test_show_reports_missing_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    result = runner.invoke(app, ["show"])

    assert result.exit_code == 1
    assert "show failed (file_not_found)" in result.output
    assert ".env.local, .env, .env.development" in result.output


@pytest.mark.parametrize(
    ("arguments", "expected"),
    [
        (["HOST"], "localhost"),
        (["PORT", "--type", "int"], "8080"),
        (["DEBUG", "--type", "bool"], "true"),
        (["DATABASE_URL", "--type", "url"], "postgres://localhost/mydb"),
    ],
)
def test_get_prints_converted_value(
    sample_env_file: Path, arguments: list[str], expected: str
) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["get", *arguments, "--file", str(sample_env_file)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_get_reports_invalid_value(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["get", "BROKEN", "--type", "int", "--file", str(sample_env_file)])

    assert result.exit_code == 1
    assert (
        "get failed (invalid_value): Cannot convert 'not_a_number' to int for key 'BROKEN'"
        in result.output
    )


def test_get_reports_missing_key(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["get", "NOPE", "--file", str(sample_env_file)])

    assert result.exit_code == 1
    assert "Missing required environment variable: NOPE" in result.output


def test_check_passes_when_all_keys_exist(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["check", "HOST", "PORT", "--file", str(sample_env_file)])

    assert result.exit_code == 0, result.output
    assert "All 2 keys present." in result.output


def test_check_lists_every_missing_key(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app, ["check", "HOST", "SMTP_HOST", "SMTP_PORT", "--file", str(sample_env_file)]
    )

    assert result.exit_code == 1
    assert "Missing required environment variable: SMTP_HOST" in result.output
    assert "Missing required environment variable: SMTP_PORT" in result.output


def test_verbose_flag_logs_load_events(sample_env_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--verbose", "get", "PORT", "--file", str(sample_env_file)])

    assert result.exit_code == 0, result.output
    assert "[typedenv] event=file_read" in result.output
    assert "[typedenv] event=parse entries=6 skipped=0" in result.output


def test_verbose_flag_prints_each_event_once_in_subprocess(sample_env_file: Path) -> None:
    """Verbose output on the real stderr should carry one plain line per event."""

    project_root = Path(__file__).resolve().parents[2]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(project_root), *filter(None, [env.get("PYTHONPATH")])]
    )

    completed = subprocess.run(
        [sys.executable, "-m", "typedenv", "--verbose", "show", "--file", str(sample_env_file)],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr.count("event=parse") == 1
    assert "[typedenv] event=parse entries=6 skipped=0" in completed.stderr
    assert "DEBUG |" not in completed.stderr
