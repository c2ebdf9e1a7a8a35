"""Lazy search results."""

from collections.abc import Callable, Iterator
from typing import Any


class SearchResults(Iterator[Any]):
    """Single-pass iterator over the hits of one search response.

    Hits are deserialized as they are consumed; iterating never sends
    another request. Once exhausted, the results cannot be restarted.
    """

    def __init__(self, response: dict[str, Any], *, deserialize: Callable[[dict[str, Any]], Any]) -> None:
        self.raw_response = response
        self._deserialize = deserialize
        self._hits = iter(self.hits)

    def __next__(self) -> Any:
        return self._deserialize(next(self._hits))

    def with_hits(self) -> Iterator[tuple[Any, dict[str, Any]]]:
        """Yield each remaining result together with its raw hit (for scores, highlights...)."""
        for hit in self._hits:
            yield self._deserialize(hit), hit

    @property
    def hits(self) -> list[dict[str, Any]]:
        """The raw hits of the response."""
        return self.raw_response.get("hits", {}).get("hits", [])

    @property
    def total(self) -> int:
        """Total number of matching documents reported by OpenSearch."""
        total = self.raw_response.get("hits", {}).get("total", 0)
        if isinstance(total, dict):
            return total.get("value", 0)
        return total

    @property
    def max_score(self) -> float | None:
        return self.raw_response.get("hits", {}).get("max_score")

    @property
    def aggregations(self) -> dict[str, Any]:
        return self.raw_response.get("aggregations", {})
