"""
Single responsibility: the collection owner and the selection rules are split.

`RecordQueryService` owns the games; `filters` owns how to pick them. The same
filters answer identically for a bare list, which is the point.
"""

from __future__ import annotations

from solid_showcase.capabilities.output import OutputSink
from solid_showcase.demonstrations.abstract import AbstractDemonstration, DemonstrationResult
from solid_showcase.domain.catalog import sample_games
from solid_showcase.queries import filters
from solid_showcase.queries.service import RecordQueryService


class SingleResponsibilityDemonstration(AbstractDemonstration):
    name: str = "srp"
    principle: str = "Single responsibility"
    description: str = "Video game store delegating selection to stateless filters."

    def __init__(self, year: int = 1994) -> None:
        self._year = year

    def run(self, sink: OutputSink) -> DemonstrationResult:
        games = sample_games()
        store = RecordQueryService(games)
        year = self._year

        released = store.find_by_metric(year)
        older = store.find_older_than(year)
        newer = store.find_newer_than(year)

        sink.emit(f"Released in {year}: {', '.join(map(str, released)) or '-'}")
        sink.emit(f"Older than {year}: {', '.join(map(str, older)) or '-'}")
        sink.emit(f"Newer than {year}: {', '.join(map(str, newer)) or '-'}")

        agrees = released == filters.by_metric(games, year)
        sink.emit(f"Stateless filters agree with the store: {agrees}")

        return DemonstrationResult(
            violations=[],
            notes="Store owns the collection; filters own the rules.",
            extra={
                "records": len(store),
                "released": len(released),
                "older": len(older),
                "newer": len(newer),
                "filters_agree": agrees,
            },
        )


__all__ = ["SingleResponsibilityDemonstration"]
