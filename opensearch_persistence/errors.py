"""Exceptions raised by repositories.

Backend exceptions from ``opensearchpy`` are translated at the service
boundary and chained with ``raise ... from``, so the original transport error
is always available as ``__cause__``.
"""

from typing import Any

from opensearchpy import exceptions


class PersistenceError(Exception):
    """Base class for all repository errors."""


class ConfigError(PersistenceError):
    """The repository options are invalid or incomplete."""


class NotFoundError(PersistenceError):
    """A single document lookup, or an index operation, found nothing."""

    def __init__(self, *, index: str, id: Any = None) -> None:
        self.index = index
        self.id = id
        if id is None:
            super().__init__(f"Index '{index}' not found")
        else:
            super().__init__(f"Document with id '{id}' not found in index '{index}'")


class StoreError(PersistenceError):
    """The backend rejected a write."""

    def __init__(self, message: str, *, status_code: Any = None, error: Any = None, info: Any = None) -> None:
        self.status_code = status_code
        self.error = error
        self.info = info
        super().__init__(message)

    @classmethod
    def from_transport_error(cls, error: exceptions.TransportError) -> "StoreError":
        """Build a StoreError carrying the backend status, error and info unchanged."""
        return cls(
            f"{error.status_code} {error.error}",
            status_code=error.status_code,
            error=error.error,
            info=error.info,
        )


class BackendUnavailable(PersistenceError):
    """The backend could not be reached."""

    def __init__(self, message: str, *, info: Any = None) -> None:
        self.info = info
        super().__init__(message)

    @classmethod
    def from_connection_error(cls, error: exceptions.ConnectionError) -> "BackendUnavailable":
        return cls(f"OpenSearch is unavailable: {error.error}", info=error.info)
