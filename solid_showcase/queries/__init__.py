"""
Queries package for the SOLID Showcase.

Re-exports the query interface, the stateless filters and the concrete services
so downstream code can import from `solid_showcase.queries` directly.
"""

from solid_showcase.queries import filters
from solid_showcase.queries.abstract import AbstractRecordQuery, RecordQuery
from solid_showcase.queries.media_store import MediaStore
from solid_showcase.queries.service import RecordQueryService

__all__ = [
    # Abstracts
    "AbstractRecordQuery",
    "RecordQuery",
    # Filters
    "filters",
    # Concrete services
    "MediaStore",
    "RecordQueryService",
]
