"""Copy parsed values into the process environment."""

from __future__ import annotations

import os
from typing import MutableMapping

from .environment import DotEnv
from .telemetry.logger import log_event


def load_into_process_environment(
    env: DotEnv,
    overwrite: bool = False,
    environ: MutableMapping[str, str] | None = None,
) -> list[str]:
    """Write `env` values into the process environment.

    Existing variables are kept unless `overwrite` is set. Concurrent writers
    to the same environment table must be serialized by the caller.

    Args:
        env: Parsed values to export.
        overwrite: Replace variables that are already set.
        environ: Target mapping; defaults to `os.environ`.

    Returns:
        Keys that were written, in iteration order of `env`.
    """

    target: MutableMapping[str, str] = os.environ if environ is None else environ

    written: list[str] = []
    for key, value in env.items():
        if not overwrite and key in target:
            continue
        target[key] = value
        written.append(key)

    log_event(
        "process_env_write",
        written=len(written),
        kept=len(env) - len(written),
        overwrite=overwrite,
    )
    return written
