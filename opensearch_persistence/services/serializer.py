"""Conversion between domain objects and stored documents."""

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from opensearch_persistence.interfaces import DocumentMetadata, IAcceptsMetadata, IPersistable

ID_KEYS = ("id", "_id")


class DocumentSerializer:
    """Serializes domain objects to document bodies and back.

    Documents are deserialized into ``klass`` when one is given, otherwise into
    a plain dict of the ``_source`` plus ``id`` (and ``version``/``score`` when
    the response carries them). Keys from ``_source`` always win over metadata.
    """

    def serialize(self, document: Any) -> dict[str, Any]:
        """Return the storage body for a domain object or mapping."""
        if isinstance(document, IPersistable):
            return dict(document.to_document())
        if isinstance(document, Mapping):
            return dict(document)
        if isinstance(document, BaseModel):
            return document.model_dump(mode="json")
        if dataclasses.is_dataclass(document) and not isinstance(document, type):
            return dataclasses.asdict(document)

        to_dict = getattr(document, "to_dict", None)
        if callable(to_dict):
            return dict(to_dict())

        raise TypeError(f"Cannot serialize {type(document).__name__}: expected a mapping or a persistable object")

    def deserialize(self, hit: dict[str, Any], klass: type | None = None) -> Any:
        """Build a domain object (or a dict when ``klass`` is None) from a get response or search hit."""
        source = dict(hit.get("_source") or {})
        metadata = DocumentMetadata.from_hit(hit)

        if klass is None:
            return {**metadata.as_fields(), **source}

        if issubclass(klass, BaseModel):
            instance = klass.model_validate(source)
        else:
            instance = klass(**source)

        if isinstance(instance, IAcceptsMetadata):
            instance.apply_metadata(metadata)
        return instance

    @staticmethod
    def extract_id(body: Mapping[str, Any]) -> Any:
        """Return the first id found in a serialized body, or None."""
        for key in ID_KEYS:
            if body.get(key) is not None:
                return body[key]
        return None

    @staticmethod
    def pop_id(body: dict[str, Any]) -> Any:
        """Like ``extract_id`` but removes the id key(s) from the body."""
        found = None
        for key in ID_KEYS:
            value = body.pop(key, None)
            if found is None and value is not None:
                found = value
        return found
