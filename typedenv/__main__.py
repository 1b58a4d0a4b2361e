"""Module entrypoint for running the inspector as ``python -m typedenv``."""

from __future__ import annotations

from typedenv.cli import main


if __name__ == "__main__":
    main()
