"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and converted values.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import EnvError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, EnvError):
        typer.secho(
            f"{command_name} failed ({exc.kind.value}): {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.cause is not None:
            typer.secho(f"Cause: {exc.cause}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def render_value(value: object) -> str:
    """Render a converted value the way it would be written in a `.env` file."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def echo_missing_keys(missing: list[str]) -> None:
    """Print one diagnostic line per missing key."""

    for key in missing:
        typer.secho(f"Missing required environment variable: {key}", fg=typer.colors.RED, err=True)
