"""Top-level package for typedenv.

This package parses `.env` formatted text into an immutable `DotEnv` and
converts raw values to typed results on request. Library events are logged
through `loguru` and stay disabled until `logger.enable("typedenv")`.
"""

from loguru import logger

from .converters import URL, EnvValue, register_converter
from .environment import DotEnv
from .errors import EnvError, ErrorKind
from .parsing import parse_env_text, unquote_value
from .process_env import load_into_process_environment
from .settings import EnvSettings
from .sources import DEFAULT_CANDIDATES, load_default, load_with_overrides

logger.disable("typedenv")

__all__ = [
    "DEFAULT_CANDIDATES",
    "DotEnv",
    "EnvError",
    "EnvSettings",
    "EnvValue",
    "ErrorKind",
    "URL",
    "__version__",
    "load_default",
    "load_into_process_environment",
    "load_with_overrides",
    "parse_env_text",
    "register_converter",
    "unquote_value",
]

__version__ = "0.1.0"
