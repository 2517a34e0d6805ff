"""
Hierarchical configuration source.

A ``Configuration`` is an immutable key/value tree. Paths use ``:`` as the section
separator (``"App:Redis"``) and key lookups are case-insensitive, so an
``appsettings.json`` section and ``APP__REDIS__CONNECTIONSTRING`` style
environment variables bind to the same options.
"""

import json
import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from redis_extensions.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = ":"


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    return value


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        existing_key = next((k for k in merged if k.lower() == key.lower()), key)
        existing = merged.pop(existing_key, None)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[existing_key] = _merge_dicts(dict(existing), value)
        else:
            merged[key] = _plain(value)
    return merged


class Configuration(Mapping[str, Any]):
    """
    Read-only hierarchical configuration.

    Nested mappings are exposed as sections. Scalar values are returned as-is.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, path: str = "") -> None:
        self._data: dict[str, Any] = dict(data or {})
        self.path = path

    @classmethod
    def from_json_file(cls, path: str | Path) -> "Configuration":
        """
        Load configuration from an appsettings-style JSON file.

        Raises:
            ConfigurationError: If the file is missing or is not a JSON object
        """
        file_path = Path(path)
        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigurationError(f"Settings file not found: {file_path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Settings file is not valid JSON: {file_path}", detail=str(e)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file must contain a JSON object: {file_path}")

        logger.debug("Loaded configuration from %s", file_path)
        return cls(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = "",
        separator: str = "__",
        environ: Mapping[str, str] | None = None,
    ) -> "Configuration":
        """
        Build configuration from environment variables.

        ``REDIS__CONNECTIONSTRING=...`` becomes the path ``REDIS:CONNECTIONSTRING``.
        With a prefix, only matching variables are read and the prefix is dropped.

        Args:
            prefix: Variable name prefix to filter on, e.g. ``"MYAPP__"``
            separator: Marker that splits a variable name into sections
            environ: Variables to read; defaults to ``os.environ``
        """
        environ = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for name, value in environ.items():
            if prefix and not name.upper().startswith(prefix.upper()):
                continue
            parts = [p for p in name[len(prefix):].split(separator) if p]
            if not parts:
                continue
            # A section always wins over a scalar of the same name
            node = data
            for part in parts[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    if child is not None:
                        logger.debug("Environment section %r replaces its scalar value", part)
                    child = {}
                    node[part] = child
                node = child
            if isinstance(node.get(parts[-1]), dict):
                logger.debug("Ignoring scalar %s; a section of the same name is set", name)
                continue
            node[parts[-1]] = value
        return cls(data)

    @classmethod
    def merge(cls, *configurations: Mapping[str, Any]) -> "Configuration":
        """Combine sources; later sources override earlier ones key by key."""
        merged: dict[str, Any] = {}
        for configuration in configurations:
            merged = _merge_dicts(merged, configuration)
        return cls(merged)

    def _find_key(self, key: str) -> str | None:
        if key in self._data:
            return key
        lowered = key.lower()
        return next((k for k in self._data if k.lower() == lowered), None)

    def get_section(self, path: str) -> "Configuration":
        """
        Return the sub-section at ``path``.

        A missing section is returned as an empty configuration, never None.
        """
        node: Configuration = self
        for part in path.split(SECTION_SEPARATOR):
            actual = node._find_key(part)
            value = node._data.get(actual) if actual is not None else None
            if isinstance(value, Mapping):
                child_path = f"{node.path}{SECTION_SEPARATOR}{actual}" if node.path else actual
                node = Configuration(value, child_path)
            else:
                return Configuration({}, f"{self.path}{SECTION_SEPARATOR}{path}" if self.path else path)
        return node

    def exists(self) -> bool:
        """Return True when the section holds any keys."""
        return bool(self._data)

    def to_dict(self) -> dict[str, Any]:
        """Return the section as nested plain dicts."""
        return _plain(self._data)

    def __getitem__(self, key: str) -> Any:
        actual = self._find_key(key)
        if actual is None:
            raise KeyError(key)
        value = self._data[actual]
        if isinstance(value, Mapping):
            return self.get_section(actual)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Configuration(path={self.path!r}, keys={list(self._data)!r})"
