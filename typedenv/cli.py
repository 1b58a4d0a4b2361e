"""Command-line interface for inspecting `.env` files.

Responsibilities:
- Expose read-only commands to show, query, and check `.env` values.
- Reuse the library loaders and typed accessors without extra parsing logic.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from .cli_rendering import echo_missing_keys, exit_with_command_error, render_value
from .converters import URL
from .environment import DotEnv
from .sources import load_default
from .telemetry.logger import disable_event_logging, enable_event_logging

app = typer.Typer(
    name="typedenv",
    no_args_is_help=True,
    help="Inspect and validate .env files.",
)


class ValueType(str, Enum):
    """Target types selectable with `get --type`."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    URL = "url"
    PATH = "path"


_VALUE_TYPES: dict[ValueType, Any] = {
    ValueType.STR: str,
    ValueType.INT: int,
    ValueType.FLOAT: float,
    ValueType.BOOL: bool,
    ValueType.URL: URL,
    ValueType.PATH: Path,
}

FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file",
        "-f",
        help="Path to a .env file. Defaults to the first of .env.local, .env, .env.development.",
    ),
]


def _load_env(env_file: Path | None) -> DotEnv:
    """Load an explicit file, or discover the default one."""

    if env_file is None:
        return load_default()
    return DotEnv.from_file(env_file)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log load events to stderr."),
    ] = False,
) -> None:
    """Inspect and validate .env files."""

    if verbose:
        handler_id = enable_event_logging(exclusive=True)
        ctx.call_on_close(lambda: disable_event_logging(handler_id))


@app.command("show")
def show_command(
    env_file: FileOption = None,
    reveal: Annotated[
        bool,
        typer.Option("--reveal", help="Print sensitive-looking values instead of `***`."),
    ] = False,
) -> None:
    """Print all parsed values in key order."""

    try:
        env = _load_env(env_file)
    except Exception as exc:
        exit_with_command_error("show", exc)

    typer.echo(env.debug_description(reveal=reveal))


@app.command("get")
def get_command(
    key: Annotated[str, typer.Argument(help="Variable name to read.")],
    env_file: FileOption = None,
    value_type: Annotated[
        ValueType,
        typer.Option("--type", "-t", help="Type the value must convert to."),
    ] = ValueType.STR,
) -> None:
    """Print one value converted to the requested type."""

    try:
        env = _load_env(env_file)
        value = env.require(key, _VALUE_TYPES[value_type])
    except Exception as exc:
        exit_with_command_error("get", exc)

    typer.echo(render_value(value))


@app.command("check")
def check_command(
    keys: Annotated[list[str], typer.Argument(help="Variable names that must be present.")],
    env_file: FileOption = None,
) -> None:
    """Fail with exit code 1 when any of the given keys is missing."""

    try:
        env = _load_env(env_file)
    except Exception as exc:
        exit_with_command_error("check", exc)

    missing = [key for key in keys if not env.has(key)]
    if missing:
        echo_missing_keys(missing)
        raise typer.Exit(code=1)
    typer.echo(f"All {len(keys)} keys present.")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
