"""Pytest fixtures for repository unit tests."""

from unittest.mock import MagicMock

import pytest

from opensearch_persistence.repositories import Repository
from tests.opensearch_persistence.models import Note


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock OpenSearch client."""
    mock = MagicMock()
    mock.indices = MagicMock()
    return mock


@pytest.fixture
def repository(mock_client: MagicMock) -> Repository:
    """Create a repository for the 'notes' index returning dicts."""
    return Repository.create(index_name="notes", client=mock_client)


@pytest.fixture
def note_repository(mock_client: MagicMock) -> Repository:
    """Create a repository for the 'notes' index returning Note instances."""
    return Repository.create(index_name="notes", client=mock_client, klass=Note)
