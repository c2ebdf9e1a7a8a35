"""Services the repository façade delegates to."""

from opensearch_persistence.services.base_service import BaseService
from opensearch_persistence.services.find_service import FindService
from opensearch_persistence.services.index_service import IndexService
from opensearch_persistence.services.search_results import SearchResults
from opensearch_persistence.services.search_service import SearchService
from opensearch_persistence.services.serializer import DocumentSerializer
from opensearch_persistence.services.store_service import StoreService

__all__ = [
    "BaseService",
    "DocumentSerializer",
    "FindService",
    "IndexService",
    "SearchResults",
    "SearchService",
    "StoreService",
]
