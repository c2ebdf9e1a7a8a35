"""Index service: lifecycle of the repository's index."""

from typing import Any

from opensearchpy import exceptions

from opensearch_persistence.entities.index import mapping_body, settings_body
from opensearch_persistence.errors import NotFoundError
from opensearch_persistence.logging import get_logger
from opensearch_persistence.services.base_service import BaseService, backend_errors

logger = get_logger(__name__)


class IndexService(BaseService):
    """Creates, deletes, refreshes and configures the repository's index."""

    def exists(self, *, index: str | None = None) -> bool:
        """Check if the index exists."""
        with backend_errors():
            return bool(self._client.indices.exists(index=index or self._index_name))

    def create(self, *, force: bool = False, index: str | None = None, **params: Any) -> Any:
        """Create the index with the repository's settings and mappings.

        Args:
            force: Delete the index first if it exists
            index: Index name (default: the repository's index name)
            **params: Extra query parameters for the create request

        Returns:
            The create response, or None if the index already existed
        """
        target_index = index or self._index_name
        if force:
            self.delete(force=True, index=target_index)

        if self.exists(index=target_index):
            logger.debug(f"Index '{target_index}' already exists, skipping creation")
            return None

        body = {
            "settings": settings_body(self._options.settings),
            "mappings": mapping_body(self._options.mapping),
        }

        logger.info(f"Creating index '{target_index}'")
        with backend_errors(write=True):
            return self._client.indices.create(index=target_index, body=body, params=params)

    def delete(self, *, force: bool = False, index: str | None = None) -> Any:
        """Delete the index.

        Raises:
            NotFoundError: If the index does not exist, unless ``force`` is set
        """
        target_index = index or self._index_name
        logger.info(f"Deleting index '{target_index}'")

        with backend_errors(write=True):
            try:
                return self._client.indices.delete(index=target_index)
            except exceptions.NotFoundError as e:
                if not force:
                    raise NotFoundError(index=target_index) from e
                logger.debug(f"Index '{target_index}' does not exist")
                return None

    def refresh(self, *, force: bool = False, index: str | None = None) -> Any:
        """Refresh the index so recent writes become searchable.

        Raises:
            NotFoundError: If the index does not exist, unless ``force`` is set
        """
        target_index = index or self._index_name

        with backend_errors():
            try:
                return self._client.indices.refresh(index=target_index)
            except exceptions.NotFoundError as e:
                if not force:
                    raise NotFoundError(index=target_index) from e
                logger.debug(f"Index '{target_index}' does not exist")
                return None

    def put_mapping(self, *, index: str | None = None) -> Any:
        """Send the repository's mappings to an existing index."""
        with backend_errors(write=True):
            return self._client.indices.put_mapping(
                index=index or self._index_name,
                body=mapping_body(self._options.mapping),
            )

    def put_settings(self, *, index: str | None = None) -> Any:
        """Send the repository's settings to an existing index."""
        with backend_errors(write=True):
            return self._client.indices.put_settings(
                index=index or self._index_name,
                body=settings_body(self._options.settings),
            )
