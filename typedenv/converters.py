"""String-to-value conversion capabilities for typed environment access.

Responsibilities:
- Resolve a target type to a fallible `str -> value | None` converter.
- Provide built-in converters for `str`, `int`, `float`, `bool`, `URL`, and `Path`.
- Derive converters for `Enum` types backed by string or integer values.
- Let user types opt in via a `from_env_value` classmethod or `register_converter`.

Converters return `None` for ordinary conversion misses instead of raising.

Key types:
- `EnvValue`: protocol for types that convert themselves from raw values.
- `URL`: parsed URL value returned for URL conversions.
"""

from __future__ import annotations

from enum import Enum
import math
from pathlib import Path
import re
import types
from typing import Any, Callable, Protocol, TypeVar, Union, get_args, get_origin, runtime_checkable
from urllib.parse import SplitResult, urlsplit

from .parsing import parse_boolean_token


T = TypeVar("T")
Converter = Callable[[str], Any]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INFINITY_TOKENS = frozenset({"inf", "infinity"})


@runtime_checkable
class EnvValue(Protocol):
    """A type that can be created from a raw environment value."""

    @classmethod
    def from_env_value(cls, value: str) -> Any:
        """Return an instance for `value`, or `None` when it cannot be converted."""


class URL(SplitResult):
    """Parsed URL produced by URL conversions."""

    __slots__ = ()

    def __str__(self) -> str:
        return self.geturl()


def convert_str(value: str) -> str:
    return value


def convert_int(value: str) -> int | None:
    """Parse an optionally signed run of ASCII digits with nothing around it."""

    if _INTEGER_PATTERN.fullmatch(value) is None:
        return None
    try:
        return int(value)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit.
        return None


def convert_float(value: str) -> float | None:
    """Parse a float, rejecting padding, digit separators, and overflow to infinity."""

    if not value or value != value.strip() or "_" in value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if math.isinf(parsed) and value.lstrip("+-").lower() not in _INFINITY_TOKENS:
        return None
    return parsed


def convert_bool(value: str) -> bool | None:
    return parse_boolean_token(value)


def convert_url(value: str) -> URL | None:
    """Parse a URL reference; empty text or embedded whitespace is rejected."""

    if not value or any(character.isspace() for character in value):
        return None
    try:
        return URL(*urlsplit(value))
    except ValueError:
        return None


def convert_path(value: str) -> Path | None:
    if not value:
        return None
    return Path(value)


def convert_enum(enum_type: type[Enum], value: str) -> Enum | None:
    """Match `value` against declared member values of a string or integer enum."""

    integer_value = convert_int(value)
    for member in enum_type:
        member_value = member.value
        if isinstance(member_value, str):
            if member_value == value:
                return member
        elif isinstance(member_value, int) and not isinstance(member_value, bool):
            if integer_value is not None and member_value == integer_value:
                return member
    return None


_CONVERTERS: dict[Any, Converter] = {
    str: convert_str,
    int: convert_int,
    float: convert_float,
    bool: convert_bool,
    URL: convert_url,
    Path: convert_path,
}


def register_converter(target_type: Any, converter: Converter | None = None) -> Any:
    """Register a converter for `target_type`.

    Usable directly (`register_converter(Decimal, parse_decimal)`) or as a
    decorator (`@register_converter(Decimal)`). Later registrations replace
    earlier ones for the same type.
    """

    if converter is None:

        def decorator(func: Converter) -> Converter:
            _CONVERTERS[target_type] = func
            return func

        return decorator

    _CONVERTERS[target_type] = converter
    return converter


def _unwrap_optional(value_type: Any) -> Any:
    """Return `T` for `Optional[T]` / `T | None`, otherwise the type unchanged."""

    origin = get_origin(value_type)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(value_type) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return value_type


def converter_for(value_type: Any) -> Converter:
    """Resolve the conversion capability for `value_type`.

    Raises:
        TypeError: If the type has no registered, declared, or derivable converter.
    """

    resolved = _unwrap_optional(value_type)
    registered = _CONVERTERS.get(resolved)
    if registered is not None:
        return registered
    if isinstance(resolved, type):
        if callable(getattr(resolved, "from_env_value", None)):
            return resolved.from_env_value
        if issubclass(resolved, Enum):
            return lambda value: convert_enum(resolved, value)
    raise TypeError(f"No environment value converter available for {type_name(value_type)}.")


def convert_value(value: str, value_type: type[T]) -> T | None:
    """Convert a raw value to `value_type`, returning `None` on conversion miss."""

    return converter_for(value_type)(value)


def type_name(value_type: Any) -> str:
    """Return a readable type name for diagnostics."""

    resolved = _unwrap_optional(value_type)
    return getattr(resolved, "__name__", repr(resolved))
