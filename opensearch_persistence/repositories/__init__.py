"""
OpenSearch repositories.

A repository persists domain objects in one index and returns domain
objects (or dicts) from lookups and searches.
"""

from opensearch_persistence.repositories.options import (
    DEFAULT_INDEX_NAME,
    RepositoryConfig,
    RepositoryDefaults,
    RepositoryOptions,
)
from opensearch_persistence.repositories.repository import Repository

__all__ = [
    "DEFAULT_INDEX_NAME",
    "Repository",
    "RepositoryConfig",
    "RepositoryDefaults",
    "RepositoryOptions",
]
