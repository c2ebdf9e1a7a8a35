"""Store service: writes and deletes documents."""

from typing import Any

from opensearchpy import exceptions

from opensearch_persistence.interfaces import PersistResult
from opensearch_persistence.logging import get_logger
from opensearch_persistence.services.base_service import BaseService, backend_errors

logger = get_logger(__name__)


def is_document_id(value: Any) -> bool:
    """Whether a value is an id rather than a document."""
    return isinstance(value, str | int) and not isinstance(value, bool)


class StoreService(BaseService):
    """Creates, updates and deletes documents in the repository's index."""

    def save(self, document: Any, *, id: Any = None, **params: Any) -> PersistResult:
        """Create or replace a document.

        Args:
            document: Domain object or mapping to store
            id: Document id; taken from the document when omitted, and
                generated by OpenSearch when the document has none either
            **params: Extra query parameters for the index request (refresh, routing...)

        Returns:
            The stored document's id and version

        Raises:
            StoreError: If OpenSearch rejects the document
            BackendUnavailable: If OpenSearch cannot be reached
        """
        body = self._serializer.serialize(document)
        if id is None:
            id = self._serializer.extract_id(body)

        with backend_errors(write=True):
            response = self._client.index(index=self._index_name, body=body, id=id, params=params)

        result = PersistResult.from_response(response)
        logger.debug(f"Saved document {result.id} to {self._index_name} (version {result.version})")
        return result

    def update(self, document_or_id: Any, **body: Any) -> PersistResult:
        """Partially update a document.

        With an id, ``body`` is the update request body (``doc``, ``script``,
        ``upsert``...). With a document, its fields are sent as ``doc`` unless
        ``body`` contains a ``script``.
        """
        if is_document_id(document_or_id):
            id = document_or_id
            request_body = dict(body)
        else:
            document = self._serializer.serialize(document_or_id)
            id = self._serializer.pop_id(document)
            if id is None:
                raise ValueError("Cannot update a document without an id")
            request_body = dict(body) if "script" in body else {"doc": document, **body}

        with backend_errors(write=True):
            response = self._client.update(index=self._index_name, id=id, body=request_body)

        result = PersistResult.from_response(response)
        logger.debug(f"Updated document {result.id} in {self._index_name} (version {result.version})")
        return result

    def delete(self, document_or_id: Any, **params: Any) -> bool:
        """Delete a document.

        Returns:
            True if the document was deleted, False if it did not exist
        """
        if is_document_id(document_or_id):
            id = document_or_id
        else:
            id = self._serializer.extract_id(self._serializer.serialize(document_or_id))
            if id is None:
                raise ValueError("Cannot delete a document without an id")

        with backend_errors(write=True):
            try:
                response = self._client.delete(index=self._index_name, id=id, params=params)
            except exceptions.NotFoundError:
                logger.debug(f"Document {id} not found in {self._index_name}, nothing to delete")
                return False

        logger.debug(f"Deleted document {id} from {self._index_name}")
        return response.get("result") == "deleted"
