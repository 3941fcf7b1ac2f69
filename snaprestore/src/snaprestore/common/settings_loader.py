"""Settings loaders - JSON, YAML and properties text into flat settings."""

import json
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import yaml

from ..core.errors import SettingsParseError

_UNICODE_ESCAPE = re.compile(r"u([0-9a-fA-F]{4})")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def stringify(value: Any) -> str:
    """Render a scalar the way it is stored in canonical settings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten(source: Mapping[Any, Any], prefix: str = "") -> dict[str, str]:
    """
    Flatten a nested mapping into dotted keys.

    Nested mappings become ``parent.child`` keys, sequences become
    ``key.0``, ``key.1`` and so on. ``None`` values are dropped.

    Args:
        source: Possibly nested mapping
        prefix: Key prefix for recursion

    Returns:
        Flat key/value mapping with string values
    """
    flat: dict[str, str] = {}
    for key, value in source.items():
        path = f"{prefix}{key}"
        _flatten_value(path, value, flat)
    return flat


def _flatten_value(path: str, value: Any, flat: dict[str, str]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        flat.update(flatten(value, prefix=f"{path}."))
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _flatten_value(f"{path}.{i}", item, flat)
    else:
        flat[path] = stringify(value)


class SettingsLoader(ABC):
    """Parses serialized settings text into a flat mapping."""

    format_name: str = ""

    @abstractmethod
    def load(self, source: str) -> dict[str, str]:
        """
        Load settings from text.

        Raises:
            SettingsParseError: If the text is malformed
        """
        pass

    def _require_mapping(self, parsed: Any) -> Mapping[Any, Any]:
        if parsed is None:
            return {}
        if not isinstance(parsed, Mapping):
            raise SettingsParseError(
                f"Failed to load {self.format_name} settings: expected an object "
                f"at the top level, got {type(parsed).__name__}",
                source_format=self.format_name,
            )
        return parsed


class JsonSettingsLoader(SettingsLoader):
    """Loads settings from JSON objects."""

    format_name = "json"

    def load(self, source: str) -> dict[str, str]:
        try:
            parsed = json.loads(source, object_pairs_hook=self._reject_duplicates)
        except json.JSONDecodeError as e:
            raise SettingsParseError(
                f"Failed to load json settings: {e}", source_format=self.format_name
            ) from e
        return flatten(self._require_mapping(parsed))

    def _reject_duplicates(self, pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in pairs:
            if key in result:
                raise SettingsParseError(
                    f"Failed to load json settings: duplicate key [{key}]",
                    source_format=self.format_name,
                )
            result[key] = value
        return result


class YamlSettingsLoader(SettingsLoader):
    """Loads settings from YAML mappings."""

    format_name = "yaml"

    def load(self, source: str) -> dict[str, str]:
        try:
            parsed = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise SettingsParseError(
                f"Failed to load yaml settings: {e}", source_format=self.format_name
            ) from e
        return flatten(self._require_mapping(parsed))


class PropertiesSettingsLoader(SettingsLoader):
    """
    Loads settings from ``key=value`` properties text.

    Supports ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash line continuations and backslash escapes.
    """

    format_name = "properties"

    def load(self, source: str) -> dict[str, str]:
        flat: dict[str, str] = {}
        for lineno, line in self._logical_lines(source):
            key, value = self._split(line)
            if not key:
                raise SettingsParseError(
                    f"Failed to load properties settings: empty key on line {lineno}",
                    source_format=self.format_name,
                )
            flat[key] = value
        return flat

    def _logical_lines(self, source: str):
        buffer = ""
        start = 0
        for lineno, raw in enumerate(source.splitlines(), start=1):
            line = raw.lstrip() if buffer else raw.strip()
            if not buffer:
                if not line or line[0] in "#!":
                    continue
                start = lineno
            trailing = len(line) - len(line.rstrip("\\"))
            if trailing % 2 == 1:
                buffer += line[:-1]
                continue
            yield start, buffer + line
            buffer = ""
        if buffer:
            yield start, buffer

    def _split(self, line: str) -> tuple[str, str]:
        i = 0
        while i < len(line):
            ch = line[i]
            if ch == "\\":
                i += 2
                continue
            if ch in "=:" or ch.isspace():
                break
            i += 1
        key = line[:i]
        rest = line[i:].lstrip()
        if rest and rest[0] in "=:" and (i == len(line) or line[i].isspace()):
            rest = rest[1:].lstrip()
        elif i < len(line) and line[i] in "=:":
            rest = line[i + 1 :].lstrip()
        return self._unescape(key), self._unescape(rest)

    def _unescape(self, text: str) -> str:
        out: list[str] = []
        i = 0
        while i < len(text):
            ch = text[i]
            if ch != "\\" or i + 1 >= len(text):
                out.append(ch)
                i += 1
                continue
            nxt = text[i + 1]
            match = _UNICODE_ESCAPE.match(text, i + 1)
            if match:
                out.append(chr(int(match.group(1), 16)))
                i = match.end()
                continue
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
        return "".join(out)


def loader_from_source(source: str) -> SettingsLoader:
    """
    Pick a loader by sniffing the text.

    A leading ``{`` or ``[`` means JSON. Otherwise the first significant line
    decides: ``=`` before any ``:`` means properties, a ``:`` means YAML.
    Anything else falls back to properties.
    """
    stripped = source.lstrip()
    if stripped[:1] in ("{", "["):
        return JsonSettingsLoader()

    for raw in stripped.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        if line == "---":
            return YamlSettingsLoader()
        eq, colon = line.find("="), line.find(":")
        if eq != -1 and (colon == -1 or eq < colon):
            return PropertiesSettingsLoader()
        if colon != -1:
            return YamlSettingsLoader()
        break

    return PropertiesSettingsLoader()


def load_source(source: str) -> dict[str, str]:
    """Detect the format of ``source`` and load it into flat settings."""
    if not source.strip():
        return {}
    return loader_from_source(source).load(source)
