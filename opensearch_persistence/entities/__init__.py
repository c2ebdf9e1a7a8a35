"""
Index entities.

Mappings and settings are declared on repositories and sent to OpenSearch
when the index is created or updated.
"""

from opensearch_persistence.entities.index import Mappings, Settings

__all__ = [
    "Mappings",
    "Settings",
]
