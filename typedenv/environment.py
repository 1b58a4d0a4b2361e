"""Immutable parsed environment with typed accessors.

Responsibilities:
- Hold a fully parsed key to raw value mapping plus optional provenance.
- Offer lenient (`get`) and strict (`require`) typed retrieval.
- Derive merged copies instead of mutating in place.
- Serialize to/from JSON and render masked debug output.

Key types:
- `DotEnv`: the parsed environment container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, ItemsView, Iterable, Iterator, KeysView, Mapping, TypeVar, overload

from .converters import convert_value, type_name
from .errors import EnvError
from .files import read_env_file
from .parsing import parse_env_text
from .telemetry.logger import log_event


T = TypeVar("T")

_SENSITIVE_KEY_MARKERS = ("password", "secret", "key", "token")
_MASK = "***"


@dataclass(frozen=True, slots=True, repr=False)
class DotEnv:
    """Parsed `.env` values with type-safe access.

    Attributes:
        values: Read-only mapping of key to raw string value.
        source_path: Absolute path of the file the values came from, if any.

    Example:
        >>> env = DotEnv.from_text("PORT=8080\\nDEBUG=yes")
        >>> env.require("PORT", int)
        8080
        >>> env.get("DEBUG", bool, default=False)
        True
    """

    values: Mapping[str, str] = field(default_factory=dict)
    source_path: Path | None = None

    def __post_init__(self) -> None:
        """Freeze a private copy of the provided mapping."""

        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash((frozenset(self.values.items()), self.source_path))

    @classmethod
    def from_text(cls, contents: str) -> DotEnv:
        """Parse `.env` formatted text."""

        return cls(parse_env_text(contents))

    @classmethod
    def from_file(cls, path: str | Path) -> DotEnv:
        """Read and parse a `.env` file.

        Raises:
            EnvError: `FILE_NOT_FOUND` when the path is not a file, `READ_ERROR`
                when it cannot be read or decoded.
        """

        absolute_path = Path(path).absolute()
        contents = read_env_file(absolute_path)
        return cls(parse_env_text(contents), source_path=absolute_path)

    @classmethod
    def merged_from(cls, paths: Iterable[str | Path]) -> DotEnv:
        """Load files in order; later files override earlier ones."""

        return cls.merge_all(cls.from_file(path) for path in paths)

    @classmethod
    def merge_all(cls, environments: Iterable[DotEnv]) -> DotEnv:
        """Fold environments left to right with `merge`."""

        result = cls()
        for environment in environments:
            result = result.merge(environment)
        return result

    @classmethod
    def from_json(cls, payload: str) -> DotEnv:
        """Build an environment from a JSON object of string keys and values.

        Raises:
            ValueError: If the payload is not a JSON object of strings.
        """

        decoded = json.loads(payload)
        if not isinstance(decoded, dict):
            raise ValueError("Environment JSON payload must be an object.")
        for key, value in decoded.items():
            if not isinstance(value, str):
                raise ValueError(f"Environment JSON value for `{key}` must be a string.")
        return cls(decoded)

    def to_json(self) -> str:
        return json.dumps(dict(self.values), ensure_ascii=False, sort_keys=True)

    def raw_get(self, key: str) -> str | None:
        """Return the raw string value for `key` without conversion."""

        return self.values.get(key)

    @overload
    def get(self, key: str) -> str | None: ...

    @overload
    def get(self, key: str, value_type: type[T]) -> T | None: ...

    @overload
    def get(self, key: str, value_type: type[T], default: T) -> T: ...

    def get(self, key: str, value_type: Any = str, default: Any = None) -> Any:
        """Return the converted value, or `default` when missing or unconvertible."""

        raw = self.values.get(key)
        if raw is None:
            return default
        converted = convert_value(raw, value_type)
        if converted is None:
            return default
        return converted

    def require(self, key: str, value_type: type[T] = str) -> T:  # type: ignore[assignment]
        """Return the converted value for `key` or raise.

        Raises:
            EnvError: `MISSING_KEY` when absent, `INVALID_VALUE` when the raw
                value cannot be converted to `value_type`.
        """

        raw = self.values.get(key)
        if raw is None:
            raise EnvError.missing_key(key)
        converted = convert_value(raw, value_type)
        if converted is None:
            raise EnvError.invalid_value(key, raw, type_name(value_type))
        return converted

    def has(self, key: str) -> bool:
        return key in self.values

    def keys(self) -> KeysView[str]:
        return self.values.keys()

    def items(self) -> ItemsView[str, str]:
        return self.values.items()

    def as_dict(self) -> dict[str, str]:
        """Return a mutable copy of the raw values."""

        return dict(self.values)

    def merge(self, other: DotEnv) -> DotEnv:
        """Return a new environment overlaid with `other`; `other` wins on conflicts."""

        merged = dict(self.values)
        merged.update(other.values)
        log_event(
            "merge",
            entries=len(merged),
            overridden=len(self.values.keys() & other.values.keys()),
        )
        return DotEnv(merged)

    def debug_description(self, reveal: bool = False) -> str:
        """Render all values in key order, masking sensitive-looking keys.

        A key is masked when its lowercased name contains `password`, `secret`,
        `key`, or `token`. Masking is a display convenience only.
        """

        lines = ["DotEnv {"]
        if self.source_path is not None:
            lines.append(f"  source: {self.source_path}")
        lines.append("  values: [")
        for key in sorted(self.values):
            value = self.values[key]
            if not reveal and _is_sensitive_key(key):
                value = _MASK
            lines.append(f"    {key}: {value}")
        lines.append("  ]")
        lines.append("}")
        return "\n".join(lines)

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        source = f" (from: {self.source_path})" if self.source_path is not None else ""
        return f"DotEnv{source}: {len(self.values)} values"


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SENSITIVE_KEY_MARKERS)
