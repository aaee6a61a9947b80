"""
Record query service: an immutable, ordered collection plus four queries.

The service snapshots its input at construction and delegates selection to
`solid_showcase.queries.filters`, so it is safe to share between readers.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from solid_showcase.domain.models import Record
from solid_showcase.queries import filters
from solid_showcase.queries.abstract import AbstractRecordQuery
from solid_showcase.utils.logging import get_logger

log = get_logger(__name__)


class RecordQueryService(AbstractRecordQuery):
    """
    Answer equality/ordering queries over a fixed collection of records.

    Duplicates are kept. Queries scan the whole collection (O(n)) and return
    fresh lists, so callers may mutate results freely.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: Tuple[Record, ...] = tuple(records)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self._records)})"

    def find_by_metric(self, target: int) -> List[Record]:
        return self._run("find_by_metric", target, filters.by_metric(self._records, target))

    def find_by_name(self, target: str) -> List[Record]:
        return self._run("find_by_name", target, filters.by_name(self._records, target))

    def find_older_than(self, threshold: int) -> List[Record]:
        return self._run("find_older_than", threshold, filters.older_than(self._records, threshold))

    def find_newer_than(self, threshold: int) -> List[Record]:
        return self._run("find_newer_than", threshold, filters.newer_than(self._records, threshold))

    def _run(self, query: str, argument: object, matches: List[Record]) -> List[Record]:
        log.debug(
            f"[QUERY] {query}({argument!r}) -> {len(matches)} match(es)",
            extra={"query": query, "argument": argument, "matches": len(matches)},
        )
        return matches


__all__ = ["RecordQueryService"]
