"""Pytest fixtures for repository integration tests."""

import os
import uuid
from collections.abc import Generator
from typing import Any

import pytest

from opensearch_persistence.client import create_client
from opensearch_persistence.config import ClientSettings
from opensearch_persistence.repositories import Repository
from tests.opensearch_persistence.models import Note


@pytest.fixture(scope="session")
def client_settings() -> ClientSettings:
    """Get OpenSearch connection settings from the environment."""
    if not os.getenv("OPENSEARCH_HOST") or not os.getenv("OPENSEARCH_PORT"):
        pytest.skip("OPENSEARCH_HOST and OPENSEARCH_PORT must be set to run integration tests")
    return ClientSettings.from_env()


@pytest.fixture(scope="session")
def opensearch(client_settings: ClientSettings) -> Any:
    """Create a real OpenSearch client."""
    return create_client(client_settings.model_copy(update={"verify_connection": True}))


@pytest.fixture
def test_index_name() -> str:
    """Generate a unique test index name."""
    return f"test-notes-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def note_repository(opensearch: Any, test_index_name: str) -> Generator[Repository, None, None]:
    """Create a Note repository backed by a fresh index."""
    repository = Repository.create(
        index_name=test_index_name,
        client=opensearch,
        klass=Note,
        setup=lambda r: r.settings(
            number_of_shards=1,
            number_of_replicas=0,
            build=lambda repo: repo.mapping(
                build=lambda m: m.indexes("title").indexes("body").indexes("tags", type="keyword")
            ),
        ),
    )
    repository.create_index(force=True)

    yield repository

    repository.delete_index(force=True)
