"""
Open/closed: movies are added to the store by extension, not modification.
"""

from __future__ import annotations

from solid_showcase.capabilities.output import OutputSink
from solid_showcase.demonstrations.abstract import AbstractDemonstration, DemonstrationResult
from solid_showcase.domain.catalog import sample_games, sample_movies
from solid_showcase.queries.media_store import MediaStore
from solid_showcase.queries.service import RecordQueryService


class OpenClosedDemonstration(AbstractDemonstration):
    name: str = "ocp"
    principle: str = "Open/closed"
    description: str = "Media store subclass adds movies without touching the game store."

    def __init__(self, category: str = "sci-fi") -> None:
        self._category = category

    def run(self, sink: OutputSink) -> DemonstrationResult:
        games = sample_games()
        base = RecordQueryService(games)
        store = MediaStore(games, sample_movies())

        sink.emit(f"Shelved {len(store.movies)} movie(s) next to {len(store)} game(s)")
        picks = store.find_movies_by_category(self._category)
        sink.emit(f"{self._category} movies: {', '.join(m.name for m in picks) or '-'}")

        unchanged = store.find_newer_than(1990) == base.find_newer_than(1990)
        sink.emit(f"Game queries unchanged by the extension: {unchanged}")

        return DemonstrationResult(
            violations=[],
            notes="MediaStore extends RecordQueryService; the base class is untouched.",
            extra={"movies": len(store.movies), "category_matches": len(picks), "unchanged": unchanged},
        )


__all__ = ["OpenClosedDemonstration"]
