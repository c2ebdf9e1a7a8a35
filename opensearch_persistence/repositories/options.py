"""Repository options and their resolution."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from opensearch_persistence.client import create_client
from opensearch_persistence.entities.index import Mappings, Settings
from opensearch_persistence.errors import ConfigError

DEFAULT_INDEX_NAME = "repository"


class RepositoryConfig(BaseModel):
    """Options passed when a repository is instantiated.

    Attributes:
        client: OpenSearch client used for all requests
        index_name: Name of the index
        document_type: Type of the documents persisted in this repository
        klass: Class to instantiate when documents are deserialized; documents
            are returned as dicts when unset
        mapping: Index mappings, a Mappings or a plain mapping
        settings: Index settings, a Settings or a plain mapping
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    client: Any = None
    index_name: str | None = None
    document_type: str | None = None
    klass: type[Any] | None = None
    mapping: Any = None
    settings: Any = None

    @field_validator("mapping")
    @classmethod
    def validate_mapping(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Mappings | Mapping):
            raise ValueError(f"mapping must be a Mappings or a mapping, got {type(v).__name__}")
        return v

    @field_validator("settings")
    @classmethod
    def validate_settings(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Settings | Mapping):
            raise ValueError(f"settings must be a Settings or a mapping, got {type(v).__name__}")
        return v

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> RepositoryConfig:
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise ConfigError(f"Invalid repository options: {e}") from e


@dataclass(frozen=True)
class RepositoryDefaults:
    """Defaults a repository class declares for all of its instances.

    Example:
        >>> class NoteRepository(Repository):
        ...     defaults = RepositoryDefaults(index_name="notes", klass=Note)
    """

    client: Any = None
    index_name: str | None = None
    document_type: str | None = None
    klass: type[Any] | None = None
    mapping: Mappings | Mapping[str, Any] | None = None
    settings: Settings | Mapping[str, Any] | None = None


class RepositoryOptions:
    """Resolves the effective repository options.

    Each option is taken from the instance options, then from the owning
    class's ``defaults``, then from a fallback: ``DEFAULT_INDEX_NAME`` for the
    index name, a client built from the environment, and empty Mappings and
    Settings. Every option is resolved once, on first read, and cached.
    """

    def __init__(
        self,
        config: RepositoryConfig,
        *,
        owner: type | None = None,
        client_factory: Callable[[], Any] = create_client,
    ) -> None:
        self._config = config
        self._owner = owner
        self._client_factory = client_factory
        self._lock = threading.RLock()
        self._cache: dict[str, Any] = {}
        self._built: set[str] = set()

    @property
    def config(self) -> RepositoryConfig:
        return self._config

    @property
    def client(self) -> Any:
        return self._memoize("client", self._resolve_client)

    @property
    def document_type(self) -> str | None:
        return self._memoize(
            "document_type",
            lambda: self._config.document_type or self._declared("document_type"),
        )

    @property
    def index_name(self) -> str:
        return self._memoize(
            "index_name",
            lambda: self._config.index_name or self._declared("index_name") or DEFAULT_INDEX_NAME,
        )

    @property
    def klass(self) -> type | None:
        return self._memoize("klass", lambda: _first_set(self._config.klass, self._declared("klass")))

    @property
    def mapping(self) -> Mappings | Mapping[str, Any]:
        return self._memoize("mapping", self._resolve_mapping)

    @property
    def settings(self) -> Settings | Mapping[str, Any]:
        return self._memoize("settings", self._resolve_settings)

    def is_built(self, name: str) -> bool:
        """Whether ``mapping`` or ``settings`` came from the fallback initializer.

        Only these accept declarations through the repository; values given
        on the instance or the class are left as they are.
        """
        getattr(self, name)
        return name in self._built

    def _memoize(self, name: str, resolve: Callable[[], Any]) -> Any:
        try:
            return self._cache[name]
        except KeyError:
            pass

        with self._lock:
            if name not in self._cache:
                self._cache[name] = resolve()
            return self._cache[name]

    def _declared(self, name: str) -> Any:
        defaults = getattr(self._owner, "defaults", None)
        if defaults is None:
            return None
        return getattr(defaults, name, None)

    def _resolve_client(self) -> Any:
        client = _first_set(self._config.client, self._declared("client"))
        if client is None:
            client = self._client_factory()
        return client

    def _resolve_mapping(self) -> Mappings | Mapping[str, Any]:
        if self._config.mapping is not None:
            return self._config.mapping

        declared = self._declared("mapping")
        if isinstance(declared, Mappings):
            return declared.model_copy(deep=True, update={"type": self.document_type})
        if declared is not None:
            return declared

        self._built.add("mapping")
        return Mappings(type=self.document_type)

    def _resolve_settings(self) -> Settings | Mapping[str, Any]:
        settings = _first_set(self._config.settings, self._declared("settings"))
        if settings is not None:
            return settings

        self._built.add("settings")
        return Settings()


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None
