"""
Stateless record filters.

These functions own the selection rules and nothing else; whoever owns a
collection (see `RecordQueryService`) hands it in. Each returns a new list and
keeps the input order.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from solid_showcase.domain.models import Record

RecordPredicate = Callable[[Record], bool]


def select(records: Iterable[Record], predicate: RecordPredicate) -> List[Record]:
    """Stable filter: every record satisfying ``predicate``, in input order."""
    return [record for record in records if predicate(record)]


def by_metric(records: Iterable[Record], target: int) -> List[Record]:
    return select(records, lambda record: record.metric == target)


def by_name(records: Iterable[Record], target: str) -> List[Record]:
    return select(records, lambda record: record.name == target)


def older_than(records: Iterable[Record], threshold: int) -> List[Record]:
    return select(records, lambda record: record.metric < threshold)


def newer_than(records: Iterable[Record], threshold: int) -> List[Record]:
    return select(records, lambda record: record.metric > threshold)


__all__ = [
    "RecordPredicate",
    "by_metric",
    "by_name",
    "newer_than",
    "older_than",
    "select",
]
