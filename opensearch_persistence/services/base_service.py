"""Base service shared by the repository's store, find, search and index services."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from opensearchpy import exceptions

from opensearch_persistence.errors import BackendUnavailable, StoreError
from opensearch_persistence.services.serializer import DocumentSerializer

if TYPE_CHECKING:
    from opensearchpy import OpenSearch

    from opensearch_persistence.repositories.options import RepositoryOptions


class BaseService:
    """Base service for repository operations.

    The client and index name are read from the repository options on every
    call, so they are only resolved once an operation actually runs.
    """

    def __init__(self, *, options: RepositoryOptions, serializer: DocumentSerializer | None = None) -> None:
        self._options = options
        self._serializer = serializer or DocumentSerializer()

    @property
    def _client(self) -> OpenSearch:
        return self._options.client

    @property
    def _index_name(self) -> str:
        return self._options.index_name


@contextmanager
def backend_errors(*, write: bool = False) -> Iterator[None]:
    """Translate opensearch-py errors raised inside the block.

    Connection failures become BackendUnavailable. Other transport errors
    become StoreError for writes and propagate unchanged for reads.
    """
    try:
        yield
    except exceptions.ConnectionError as e:
        raise BackendUnavailable.from_connection_error(e) from e
    except exceptions.TransportError as e:
        if write:
            raise StoreError.from_transport_error(e) from e
        raise
