"""Search service for repository queries."""

import time
from collections.abc import Mapping
from functools import partial
from typing import Any

from opensearch_persistence.logging import get_logger
from opensearch_persistence.services.base_service import BaseService, backend_errors
from opensearch_persistence.services.search_results import SearchResults

logger = get_logger(__name__)

MATCH_ALL_QUERY = {"query": {"match_all": {}}}


def build_request(query: Any, params: Mapping[str, Any]) -> tuple[dict[str, Any] | None, dict[str, Any]]:
    """Split a query into a request body and query parameters.

    A mapping is the request body, an object with ``to_dict()`` (such as an
    opensearch-dsl ``Search``) is converted to one, and a string is sent as a
    URI search (``q``).
    """
    request_params = dict(params)
    if isinstance(query, str):
        request_params["q"] = query
        return None, request_params
    if isinstance(query, Mapping):
        return dict(query), request_params

    to_dict = getattr(query, "to_dict", None)
    if callable(to_dict):
        return to_dict(), request_params

    raise TypeError(f"Unsupported query type {type(query).__name__}: expected a mapping, a string or an object with to_dict()")


class SearchService(BaseService):
    """Runs searches and counts against the repository's index."""

    def search(self, query: Any, **params: Any) -> SearchResults:
        """Execute a search and wrap the response in lazy results."""
        body, request_params = build_request(query, params)

        started = time.perf_counter()
        with backend_errors():
            response = self._client.search(index=self._index_name, body=body, params=request_params)
        duration = (time.perf_counter() - started) * 1000

        logger.debug(f"{self._index_name} Search ({duration:.1f}ms) {body if body is not None else request_params}")
        return SearchResults(
            response,
            deserialize=partial(self._serializer.deserialize, klass=self._options.klass),
        )

    def count(self, query: Any = None, **params: Any) -> int:
        """Count documents matching a query (all documents by default)."""
        body, request_params = build_request(MATCH_ALL_QUERY if query is None else query, params)

        with backend_errors():
            response = self._client.count(index=self._index_name, body=body, params=request_params)
        return response["count"]
