"""Find service: fetches documents by id."""

from collections.abc import Sequence
from typing import Any

from opensearchpy import exceptions

from opensearch_persistence.errors import NotFoundError
from opensearch_persistence.logging import get_logger
from opensearch_persistence.services.base_service import BaseService, backend_errors

logger = get_logger(__name__)


class FindService(BaseService):
    """Looks up documents by id and deserializes them."""

    def find_one(self, id: Any, **params: Any) -> Any:
        """Fetch a single document.

        Raises:
            NotFoundError: If there is no document with this id
        """
        with backend_errors():
            try:
                hit = self._client.get(index=self._index_name, id=id, params=params)
            except exceptions.NotFoundError as e:
                raise NotFoundError(index=self._index_name, id=id) from e

        if hit.get("found") is False:
            raise NotFoundError(index=self._index_name, id=id)
        return self._serializer.deserialize(hit, self._options.klass)

    def find_many(self, ids: Sequence[Any], **params: Any) -> list[Any]:
        """Fetch several documents in one request.

        Results keep the order of ``ids``. Documents that are missing, or
        whose lookup failed, are left out instead of raising.
        """
        if not ids:
            return []

        with backend_errors():
            response = self._client.mget(index=self._index_name, body={"ids": list(ids)}, params=params)

        klass = self._options.klass
        results = []
        for doc in response["docs"]:
            if not doc.get("found"):
                logger.debug(f"Skipping document {doc.get('_id')} from {self._index_name}: {doc.get('error', 'not found')}")
                continue
            results.append(self._serializer.deserialize(doc, klass))
        return results

    def exists(self, id: Any, **params: Any) -> bool:
        """Whether a document with this id exists."""
        with backend_errors():
            return bool(self._client.exists(index=self._index_name, id=id, params=params))
