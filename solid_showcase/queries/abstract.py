"""
Abstract query interface for collections of records.

Concrete query services should implement the RecordQuery protocol (or subclass
the AbstractRecordQuery ABC) so callers can depend on the four read-only
queries rather than on a particular storage choice.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from solid_showcase.domain.models import Record


@runtime_checkable
class RecordQuery(Protocol):
    """
    Read-only equality/ordering queries over an ordered record collection.

    Every query returns a new list in the collection's original order and
    never fails, whatever the target or threshold.
    """

    def find_by_metric(self, target: int) -> List[Record]:
        """Records whose metric equals ``target``."""
        ...

    def find_by_name(self, target: str) -> List[Record]:
        """Records whose name equals ``target`` exactly."""
        ...

    def find_older_than(self, threshold: int) -> List[Record]:
        """Records whose metric is strictly below ``threshold``."""
        ...

    def find_newer_than(self, threshold: int) -> List[Record]:
        """Records whose metric is strictly above ``threshold``."""
        ...


class AbstractRecordQuery(abc.ABC):
    """
    Optional ABC helper for class-based implementations.
    """

    @abc.abstractmethod
    def find_by_metric(self, target: int) -> List[Record]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def find_by_name(self, target: str) -> List[Record]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def find_older_than(self, threshold: int) -> List[Record]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def find_newer_than(self, threshold: int) -> List[Record]:  # pragma: no cover
        raise NotImplementedError


__all__ = ["AbstractRecordQuery", "RecordQuery"]
