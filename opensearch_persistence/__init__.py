"""Repository-pattern persistence for OpenSearch."""

from opensearch_persistence.entities import Mappings, Settings
from opensearch_persistence.errors import (
    BackendUnavailable,
    ConfigError,
    NotFoundError,
    PersistenceError,
    StoreError,
)
from opensearch_persistence.interfaces import (
    DocumentMetadata,
    IAcceptsMetadata,
    IPersistable,
    PersistResult,
)
from opensearch_persistence.logging import LogLevel, setup_logging
from opensearch_persistence.repositories import (
    DEFAULT_INDEX_NAME,
    Repository,
    RepositoryDefaults,
)
from opensearch_persistence.services import SearchResults

__all__ = [
    "DEFAULT_INDEX_NAME",
    "BackendUnavailable",
    "ConfigError",
    "DocumentMetadata",
    "IAcceptsMetadata",
    "IPersistable",
    "LogLevel",
    "Mappings",
    "NotFoundError",
    "PersistResult",
    "PersistenceError",
    "Repository",
    "RepositoryDefaults",
    "SearchResults",
    "Settings",
    "StoreError",
    "setup_logging",
]
