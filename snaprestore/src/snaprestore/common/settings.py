"""Canonical settings - immutable flat key/value maps with dotted keys."""

from collections.abc import Iterator, Mapping
from typing import Any, Union

from .settings_loader import flatten, load_source, stringify

_TRUE = {"true", "on", "yes", "1"}
_FALSE = {"false", "off", "no", "0"}


class Settings(Mapping[str, str]):
    """
    Immutable, flattened settings.

    Keys are dotted paths (``compress.level``) and values are strings.
    Instances compare equal when their flat contents are equal, no matter
    which representation they were built from.
    """

    EMPTY: "Settings"

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, str] = dict(sorted(flatten(values or {}).items()))

    @staticmethod
    def builder() -> "SettingsBuilder":
        """Create a new settings builder."""
        return SettingsBuilder()

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Settings):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return f"Settings({self._values!r})"

    def get_as_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Get a value parsed as a boolean."""
        value = self._values.get(key)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"Failed to parse value [{value}] for setting [{key}] as boolean")

    def get_as_int(self, key: str, default: int | None = None) -> int | None:
        """Get a value parsed as an integer."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(
                f"Failed to parse value [{value}] for setting [{key}] as integer"
            ) from e

    def get_as_float(self, key: str, default: float | None = None) -> float | None:
        """Get a value parsed as a float."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError as e:
            raise ValueError(
                f"Failed to parse value [{value}] for setting [{key}] as float"
            ) from e

    def get_as_list(self, key: str) -> list[str]:
        """
        Get a sequence setting.

        Reads ``key.0``, ``key.1``... in order; a plain comma separated value
        under ``key`` is split instead.
        """
        items = []
        i = 0
        while f"{key}.{i}" in self._values:
            items.append(self._values[f"{key}.{i}"])
            i += 1
        if items:
            return items
        value = self._values.get(key)
        if value is None:
            return []
        return [part.strip() for part in value.split(",") if part.strip()]

    def get_by_prefix(self, prefix: str) -> "Settings":
        """Get settings under ``prefix`` with the prefix stripped from keys."""
        return Settings(
            {k[len(prefix) :]: v for k, v in self._values.items() if k.startswith(prefix)}
        )

    def as_dict(self) -> dict[str, str]:
        """Get a flat copy of the settings."""
        return dict(self._values)

    def as_nested(self) -> dict[str, Any]:
        """Expand dotted keys back into nested dictionaries."""
        nested: dict[str, Any] = {}
        for key, value in self._values.items():
            node = nested
            *parents, leaf = key.split(".")
            for part in parents:
                node = node.setdefault(part, {})
                if not isinstance(node, dict):
                    break
            else:
                node[leaf] = value
                continue
            # A scalar already sits on this path; keep the dotted key
            nested[key] = value
        return nested


class SettingsBuilder:
    """Mutable accumulator producing immutable :class:`Settings`."""

    def __init__(self):
        self._values: dict[str, str] = {}

    def put(self, key: str, value: Any) -> "SettingsBuilder":
        """Set a single key. Nested values are flattened under ``key``."""
        if isinstance(value, (Mapping, list, tuple)):
            self._values.update(flatten({key: value}))
        elif value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = stringify(value)
        return self

    def put_all(self, source: Mapping[str, Any]) -> "SettingsBuilder":
        """Merge a mapping (or another Settings) into this builder."""
        self._values.update(flatten(source))
        return self

    def load_from_source(self, source: str) -> "SettingsBuilder":
        """
        Merge settings parsed from JSON, YAML or properties text.

        Raises:
            SettingsParseError: If the text is malformed
        """
        self._values.update(load_source(source))
        return self

    def remove(self, key: str) -> "SettingsBuilder":
        """Remove a key if present."""
        self._values.pop(key, None)
        return self

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def build(self) -> Settings:
        """Freeze the accumulated values."""
        return Settings(self._values)


Settings.EMPTY = Settings()

SettingsSource = Union[Settings, SettingsBuilder, str, Mapping[str, Any]]


def to_settings(source: SettingsSource) -> Settings:
    """
    Normalize any supported settings representation into :class:`Settings`.

    Accepts a built ``Settings``, an in-progress ``SettingsBuilder``,
    JSON/YAML/properties text or a generic (possibly nested) mapping.

    Raises:
        SettingsParseError: If text input is malformed
        TypeError: For any other input type
    """
    if isinstance(source, Settings):
        return source
    if isinstance(source, SettingsBuilder):
        return source.build()
    if isinstance(source, str):
        return Settings(load_source(source))
    if isinstance(source, Mapping):
        return Settings(flatten(source))
    raise TypeError(f"Unsupported settings source type: {type(source).__name__}")
