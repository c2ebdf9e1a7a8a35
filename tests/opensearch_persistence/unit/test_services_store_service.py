"""Unit tests for StoreService and the shared error translation."""

from typing import Any
from unittest.mock import MagicMock

import pytest
from opensearchpy import exceptions

from opensearch_persistence.errors import BackendUnavailable, StoreError
from opensearch_persistence.repositories import RepositoryConfig, RepositoryOptions
from opensearch_persistence.services.base_service import BaseService
from opensearch_persistence.services.store_service import StoreService, is_document_id
from tests.opensearch_persistence.models import Bookmark, Note


@pytest.mark.unit
class TestBaseService:
    """Tests for BaseService."""

    def test_client_and_index_name_read_from_options(self) -> None:
        """Test that the service reads the client and index name lazily from options."""
        mock_client = MagicMock()
        options = RepositoryOptions(RepositoryConfig(client=mock_client, index_name="notes"))

        service = BaseService(options=options)

        assert service._client is mock_client
        assert service._index_name == "notes"


@pytest.mark.unit
class TestStoreService:
    """Tests for StoreService."""

    @pytest.fixture
    def store(self, mock_client: MagicMock) -> StoreService:
        options = RepositoryOptions(RepositoryConfig(client=mock_client, index_name="notes"))
        return StoreService(options=options)

    def test_save_uses_id_from_document(self, store: StoreService, mock_client: Any) -> None:
        """Test that the document's own id is used when none is given."""
        mock_client.index.return_value = {"_id": "b1", "_version": 1, "result": "created"}

        result = store.save(Bookmark("https://example.com", id="b1"))

        assert result.id == "b1"
        mock_client.index.assert_called_once_with(
            index="notes", body={"url": "https://example.com", "id": "b1"}, id="b1", params={}
        )

    def test_save_rejected_raises_store_error(self, store: StoreService, mock_client: Any) -> None:
        """Test that a backend rejection keeps its status and details."""
        info = {"error": {"type": "mapper_parsing_exception", "reason": "failed to parse field [views]"}}
        mock_client.index.side_effect = exceptions.RequestError(400, "mapper_parsing_exception", info)

        with pytest.raises(StoreError) as exc_info:
            store.save({"views": "many"})

        assert exc_info.value.status_code == 400
        assert exc_info.value.error == "mapper_parsing_exception"
        assert exc_info.value.info == info
        assert isinstance(exc_info.value.__cause__, exceptions.RequestError)

    def test_save_conflict_raises_store_error(self, store: StoreService, mock_client: Any) -> None:
        """Test that version conflicts surface as StoreError."""
        mock_client.index.side_effect = exceptions.ConflictError(409, "version_conflict_engine_exception", {})

        with pytest.raises(StoreError, match="409"):
            store.save({"id": "1", "title": "A"}, if_seq_no=1, if_primary_term=1)

    def test_save_connection_failure_raises_backend_unavailable(self, store: StoreService, mock_client: Any) -> None:
        """Test that transport failures surface as BackendUnavailable."""
        mock_client.index.side_effect = exceptions.ConnectionError("N/A", "Connection refused", Exception())

        with pytest.raises(BackendUnavailable):
            store.save({"title": "A"})

    def test_update_document_sends_doc(self, store: StoreService, mock_client: Any) -> None:
        """Test that updating a document sends its fields as a partial doc without the id."""
        mock_client.update.return_value = {"_id": "b1", "_version": 2, "result": "updated"}

        store.update({"id": "b1", "title": "B"}, doc_as_upsert=True)

        mock_client.update.assert_called_once_with(
            index="notes", id="b1", body={"doc": {"title": "B"}, "doc_as_upsert": True}
        )

    def test_update_document_with_script(self, store: StoreService, mock_client: Any) -> None:
        """Test that a script replaces the partial doc."""
        mock_client.update.return_value = {"_id": "b1", "_version": 2}
        script = {"source": "ctx._source.views += 1"}

        store.update({"id": "b1", "title": "B"}, script=script)

        assert mock_client.update.call_args.kwargs["body"] == {"script": script}

    def test_update_document_without_id(self, store: StoreService) -> None:
        """Test that updating a document without id is rejected."""
        with pytest.raises(ValueError, match="without an id"):
            store.update(Note(title="A"))

    def test_delete_document_object(self, store: StoreService, mock_client: Any) -> None:
        """Test deleting by document uses its id."""
        mock_client.delete.return_value = {"_id": "b1", "result": "deleted"}

        assert store.delete(Bookmark("https://example.com", id="b1")) is True
        mock_client.delete.assert_called_once_with(index="notes", id="b1", params={})

    def test_delete_rejected_raises_store_error(self, store: StoreService, mock_client: Any) -> None:
        """Test that errors other than not-found are not swallowed."""
        mock_client.delete.side_effect = exceptions.AuthorizationException(403, "security_exception", {})

        with pytest.raises(StoreError):
            store.delete("1")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", True), (1, True), (True, False), ({"id": "1"}, False), (None, False)],
    )
    def test_is_document_id(self, value: Any, expected: bool) -> None:
        """Test telling ids apart from documents."""
        assert is_document_id(value) is expected
