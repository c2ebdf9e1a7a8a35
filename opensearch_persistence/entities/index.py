"""Index mappings and settings."""

import json
from collections.abc import Callable, Mapping
from copy import deepcopy
from pathlib import Path
from typing import IO, Any, Self

from pydantic import BaseModel, Field

from opensearch_persistence.errors import ConfigError

DEFAULT_FIELD_TYPE = "text"

TYPES_WITH_EMBEDDED_PROPERTIES = ("object", "nested")


class Mappings(BaseModel):
    """Field mappings for an index, built up with ``indexes()``.

    Example:
        >>> mappings = Mappings(options={"dynamic": "strict"})
        >>> mappings = mappings.indexes("title").indexes("author", build=lambda m: m.indexes("name"))
        >>> mappings.to_dict()["properties"]["author"]
        {'type': 'object', 'properties': {'name': {'type': 'text'}}}
    """

    type: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    properties: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def indexes(
        self,
        name: str,
        *,
        build: Callable[["Mappings"], Any] | None = None,
        **options: Any,
    ) -> Self:
        """Declare a field.

        Fields without an explicit ``type`` are ``text``. When ``build`` is
        given the field gets sub-fields: nested ``properties`` for object and
        nested types (the default type becomes ``object``), multi-``fields``
        otherwise.

        Args:
            name: Field name
            build: Callable receiving a Mappings to declare sub-fields on
            **options: Field mapping options (type, analyzer, ...)

        Returns:
            This Mappings, for chaining
        """
        field = dict(options)
        if build is not None:
            field.setdefault("type", "object")
            key = "properties" if field["type"] in TYPES_WITH_EMBEDDED_PROPERTIES else "fields"
            nested = Mappings(properties=field.get(key, {}))
            build(nested)
            field[key] = nested.properties
        field.setdefault("type", DEFAULT_FIELD_TYPE)
        self.properties[name] = field
        return self

    def to_dict(self) -> dict[str, Any]:
        """Request body for index creation or ``put_mapping``."""
        return {**deepcopy(self.options), "properties": deepcopy(self.properties)}


class Settings(BaseModel):
    """Index settings."""

    settings: dict[str, Any] = Field(default_factory=dict)

    def update(self, values: Mapping[str, Any]) -> Self:
        self.settings.update(values)
        return self

    def to_dict(self) -> dict[str, Any]:
        return deepcopy(self.settings)

    @classmethod
    def load(cls, source: str | Path | IO[str]) -> Self:
        """Load settings from a JSON file path or an open file."""
        return cls(settings=load_json_settings(source))


def load_json_settings(source: str | Path | IO[str]) -> dict[str, Any]:
    """Read a JSON object from a path or a readable file."""
    try:
        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            with Path(source).open(encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not load index settings from {source!r}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Index settings must be a JSON object, got {type(data).__name__}")
    return data


def mapping_body(mapping: "Mappings | Mapping[str, Any]") -> dict[str, Any]:
    """Request body for a resolved mapping, whether built or given as a plain mapping."""
    if isinstance(mapping, Mappings):
        return mapping.to_dict()
    return deepcopy(dict(mapping))


def settings_body(settings: "Settings | Mapping[str, Any]") -> dict[str, Any]:
    """Request body for resolved settings, whether built or given as a plain mapping."""
    if isinstance(settings, Settings):
        return settings.to_dict()
    return deepcopy(dict(settings))
