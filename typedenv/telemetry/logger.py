"""Structured library event logging.

Responsibilities:
- Emit concise, deterministic event lines for parsing and loading activity.
- Route everything through `loguru`, disabled for the package until a caller
  opts in with `logger.enable("typedenv")`.

Values read from `.env` sources are never passed to this module; callers log
keys, counts, and paths only.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def format_event(event: str, **context: object) -> str:
    """Render one event line without emitting it."""

    return f"[typedenv] event={event}{_format_context(context)}"


def log_event(event: str, **context: object) -> None:
    """Emit one debug-level library event."""

    logger.debug(format_event(event, **context))


def enable_event_logging(
    sink: TextIO | None = None,
    level: str = "DEBUG",
    exclusive: bool = False,
) -> int:
    """Enable package events and attach a plain-message sink.

    With `exclusive`, every previously configured handler (including loguru's
    default stderr handler) is removed first so each event is printed once.

    Returns:
        The loguru handler id, so callers can remove the sink again.
    """

    if exclusive:
        logger.remove()
    logger.enable("typedenv")
    return logger.add(sink or sys.stderr, format="{message}", level=level, colorize=False)


def disable_event_logging(handler_id: int) -> None:
    """Detach a sink added by `enable_event_logging` and silence package events."""

    logger.remove(handler_id)
    logger.disable("typedenv")
