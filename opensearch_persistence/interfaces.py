"""Type definitions and interfaces for repositories and domain objects."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DocumentMetadata:
    """Store-assigned metadata of a document."""

    id: str
    index: str | None = None
    version: int | None = None
    score: float | None = None
    seq_no: int | None = None
    primary_term: int | None = None

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> "DocumentMetadata":
        """Extract metadata from a get/mget response or a search hit."""
        return cls(
            id=hit["_id"],
            index=hit.get("_index"),
            version=hit.get("_version"),
            score=hit.get("_score"),
            seq_no=hit.get("_seq_no"),
            primary_term=hit.get("_primary_term"),
        )

    def as_fields(self) -> dict[str, Any]:
        """Fields merged into raw documents: id, plus version and score when present."""
        fields: dict[str, Any] = {"id": self.id}
        if self.version is not None:
            fields["version"] = self.version
        if self.score is not None:
            fields["score"] = self.score
        return fields


@dataclass(frozen=True)
class PersistResult:
    """Result of a write."""

    id: str
    version: int | None
    result: str | None = None

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "PersistResult":
        return cls(id=response["_id"], version=response.get("_version"), result=response.get("result"))


class IPersistable(ABC):
    """Domain objects that produce their own storage document.

    Any class with a ``to_document()`` method counts as persistable,
    subclassing is optional.
    """

    @abstractmethod
    def to_document(self) -> dict[str, Any]:
        """Return the document body to store."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> bool:
        if cls is IPersistable:
            return callable(getattr(subclass, "to_document", None)) or NotImplemented
        return NotImplemented


class IAcceptsMetadata(ABC):
    """Domain objects that want document metadata attached after loading.

    Any class with an ``apply_metadata()`` method qualifies, subclassing is
    optional.
    """

    @abstractmethod
    def apply_metadata(self, metadata: DocumentMetadata) -> None:
        """Attach metadata (id, version, score...) to this instance."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> bool:
        if cls is IAcceptsMetadata:
            return callable(getattr(subclass, "apply_metadata", None)) or NotImplemented
        return NotImplemented
