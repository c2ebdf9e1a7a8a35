"""Repository: persistence of domain objects in an OpenSearch index."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import IO, Any, ClassVar, Self

from opensearch_persistence.entities.index import Mappings, Settings, load_json_settings
from opensearch_persistence.interfaces import PersistResult
from opensearch_persistence.repositories.options import (
    RepositoryConfig,
    RepositoryDefaults,
    RepositoryOptions,
)
from opensearch_persistence.services import (
    DocumentSerializer,
    FindService,
    IndexService,
    SearchResults,
    SearchService,
    StoreService,
)


class Repository:
    """Binds one OpenSearch index to an optional domain class.

    Options resolve from the instance, then from the class ``defaults``,
    then from fallbacks (see RepositoryOptions). Each operation is a single
    synchronous request through the client; retries and timeouts are the
    client's business.

    Example:
        >>> repository = Repository.create(
        ...     index_name="notes",
        ...     klass=Note,
        ...     setup=lambda r: r.mapping(dynamic="strict").indexes("title").indexes("body"),
        ... )
        >>> repository.create_index()
        >>> result = repository.save(Note(title="Hello"))
        >>> repository.find(result.id)
        Note(title='Hello')
    """

    defaults: ClassVar[RepositoryDefaults | None] = None

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._options = RepositoryOptions(
            RepositoryConfig.from_options({**(options or {}), **kwargs}),
            owner=type(self),
        )
        self._serializer = DocumentSerializer()

        # Initialize service classes
        self._store = StoreService(options=self._options, serializer=self._serializer)
        self._finder = FindService(options=self._options, serializer=self._serializer)
        self._searcher = SearchService(options=self._options, serializer=self._serializer)
        self._indexes = IndexService(options=self._options, serializer=self._serializer)

    @classmethod
    def create(
        cls,
        options: Mapping[str, Any] | None = None,
        *,
        setup: Callable[[Self], Any] | None = None,
        **kwargs: Any,
    ) -> Self:
        """Create a repository and optionally run ``setup`` on it.

        ``setup`` receives the new repository, typically to declare mappings
        and settings. Nothing is sent to OpenSearch.
        """
        repository = cls(options, **kwargs)
        if setup is not None:
            setup(repository)
        return repository

    # Options

    @property
    def options(self) -> RepositoryConfig:
        return self._options.config

    @property
    def client(self) -> Any:
        return self._options.client

    @property
    def document_type(self) -> str | None:
        return self._options.document_type

    @property
    def index_name(self) -> str:
        return self._options.index_name

    @property
    def klass(self) -> type | None:
        return self._options.klass

    def mapping(
        self,
        *,
        build: Callable[[Mappings], Any] | None = None,
        **options: Any,
    ) -> Mappings | Mapping[str, Any]:
        """Get the index mappings, declaring fields on them when given ``build``/options.

        Declarations only apply when the mappings were not given on the
        instance or the class; those are returned unchanged.

        Example:
            >>> repository.mapping(dynamic="strict", build=lambda m: m.indexes("title", analyzer="snowball"))
        """
        mapping = self._options.mapping
        if self._options.is_built("mapping") and isinstance(mapping, Mappings):
            mapping.options.update(options)
            if build is not None:
                build(mapping)
        return mapping

    mappings = mapping

    def settings(
        self,
        source: str | Path | IO[str] | None = None,
        *,
        build: Callable[[Self], Any] | None = None,
        **values: Any,
    ) -> Settings | Mapping[str, Any]:
        """Get the index settings, updating them when given a JSON source or values.

        ``build`` receives the repository, so mappings can be declared along
        with the settings. As with ``mapping``, updates only apply to settings
        that were not given on the instance or the class.
        """
        settings = self._options.settings
        if self._options.is_built("settings") and isinstance(settings, Settings):
            if source is not None:
                settings.update(load_json_settings(source))
            settings.update(values)
            if build is not None:
                build(self)
        return settings

    # Serialization

    def serialize(self, document: Any) -> dict[str, Any]:
        return self._serializer.serialize(document)

    def deserialize(self, hit: dict[str, Any]) -> Any:
        return self._serializer.deserialize(hit, self.klass)

    # Index

    def index_exists(self) -> bool:
        return self._indexes.exists()

    def create_index(self, *, force: bool = False, index: str | None = None, **params: Any) -> Any:
        return self._indexes.create(force=force, index=index, **params)

    def delete_index(self, *, force: bool = False, index: str | None = None) -> Any:
        return self._indexes.delete(force=force, index=index)

    def refresh_index(self, *, force: bool = False, index: str | None = None) -> Any:
        return self._indexes.refresh(force=force, index=index)

    def update_mapping(self) -> Any:
        return self._indexes.put_mapping()

    def update_settings(self) -> Any:
        return self._indexes.put_settings()

    # Store

    def save(self, document_or_id: Any, document: Any = None, **params: Any) -> PersistResult:
        """Create or replace a document.

        ``save(document)`` stores the document under the id it carries (or a
        generated one); ``save(id, document)`` stores it under ``id``, which
        may be None.

        Returns:
            PersistResult with the document's id and version
        """
        if document is None:
            return self._store.save(document_or_id, **params)
        return self._store.save(document, id=document_or_id, **params)

    def update(self, document_or_id: Any, **body: Any) -> PersistResult:
        return self._store.update(document_or_id, **body)

    def delete(self, document_or_id: Any, **params: Any) -> bool:
        return self._store.delete(document_or_id, **params)

    # Find

    def find(self, *ids: Any, **params: Any) -> Any:
        """Find one document by id, or several by a list of ids.

        ``find(id)`` returns one result and raises NotFoundError when it is
        missing. ``find([id1, id2])`` and ``find(id1, id2)`` return a list in
        the order of the ids, leaving out any that are missing.
        """
        if len(ids) == 1:
            id = ids[0]
            if isinstance(id, list | tuple):
                return self._finder.find_many(id, **params)
            return self._finder.find_one(id, **params)
        return self._finder.find_many(ids, **params)

    def exists(self, id: Any, **params: Any) -> bool:
        return self._finder.exists(id, **params)

    # Search

    def search(self, query: Any, **params: Any) -> SearchResults:
        """Search the index.

        Args:
            query: Request body mapping, object with ``to_dict()``, or a query string
            **params: Extra query parameters (size, from_, routing...)

        Returns:
            Lazy, single-pass results deserialized as they are iterated
        """
        return self._searcher.search(query, **params)

    def count(self, query: Any = None, **params: Any) -> int:
        return self._searcher.count(query, **params)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}:0x{id(self):x} index_name={self.index_name} "
            f"document_type={self.document_type} klass={self.klass}>"
        )
