"""`.env` text parsing and shared token helpers.

Responsibilities:
- Turn `.env` text into a key to raw value mapping in a single pass.
- Strip quotes and resolve escape sequences in double-quoted values.
- Provide the boolean token vocabulary shared by converters and the CLI.

The parser is permissive: malformed lines are dropped, never reported.
"""

from __future__ import annotations

from enum import Enum
import re

from .telemetry.logger import log_event


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})

_LINE_BREAK_PATTERN = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")
# Tab plus the Unicode space separators (category Zs); control characters are kept.
_INLINE_WHITESPACE = (
    "\t \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u202f\u205f\u3000"
)
_ESCAPE_PATTERN = re.compile(r"\\([nrt\"\\])")
_ESCAPE_REPLACEMENTS = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def parse_boolean_token(value: str) -> bool | None:
    """Parse a boolean token case-insensitively, returning `None` when unrecognized.

    Surrounding whitespace is significant: `" true"` is not a boolean token.
    """

    token = value.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def _replace_escape(match: re.Match[str]) -> str:
    return _ESCAPE_REPLACEMENTS[match.group(1)]


def unquote_value(value: str) -> str:
    """Remove one pair of matching surrounding quotes from a trimmed value.

    Double-quoted values have `\\n`, `\\r`, `\\t`, `\\"` and `\\\\` resolved in
    one left-to-right pass; other backslash sequences are kept verbatim.
    Single-quoted values are literal. Anything else is returned unchanged.
    """

    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return _ESCAPE_PATTERN.sub(_replace_escape, value[1:-1])
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        return value[1:-1]
    return value


class LineKind(str, Enum):
    """Classification of one `.env` line."""

    ENTRY = "entry"
    BLANK = "blank"
    COMMENT = "comment"
    MALFORMED = "malformed"


def _trim(text: str) -> str:
    return text.strip(_INLINE_WHITESPACE)


def classify_env_line(line: str) -> tuple[LineKind, tuple[str, str] | None]:
    """Classify one line and return its `(key, value)` entry when it has one.

    Lines without `=` or with an empty key are `MALFORMED`.
    """

    stripped = _trim(line)
    if not stripped:
        return LineKind.BLANK, None
    if stripped.startswith("#"):
        return LineKind.COMMENT, None

    key_part, separator, value_part = stripped.partition("=")
    key = _trim(key_part)
    if not separator or not key:
        return LineKind.MALFORMED, None
    return LineKind.ENTRY, (key, unquote_value(_trim(value_part)))


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Parse one line into a `(key, value)` entry, or `None` when it carries none."""

    return classify_env_line(line)[1]


def parse_env_text(text: str) -> dict[str, str]:
    """Parse `.env` formatted text into a mapping of key to raw value.

    Args:
        text: Full `.env` contents. `\\r\\n`, `\\n`, `\\r`, `\\v`, `\\f`,
            U+0085, U+2028 and U+2029 all end a line.

    Returns:
        Mapping where later lines override earlier ones for the same key.
    """

    values: dict[str, str] = {}
    skipped = 0
    for line in _LINE_BREAK_PATTERN.split(text):
        kind, entry = classify_env_line(line)
        if kind is LineKind.MALFORMED:
            skipped += 1
        if entry is None:
            continue
        key, value = entry
        values[key] = value

    log_event("parse", entries=len(values), skipped=skipped)
    return values
