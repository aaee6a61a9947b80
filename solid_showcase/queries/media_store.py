"""
Media store: the record query service extended with a movie shelf.

Movies are added by subclassing; `RecordQueryService` itself is untouched and
every record query behaves exactly as it does there.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from solid_showcase.domain.models import Movie, Record
from solid_showcase.queries.service import RecordQueryService


class MediaStore(RecordQueryService):
    """Games answer record queries; movies sit on their own shelf."""

    def __init__(self, games: Iterable[Record] = (), movies: Iterable[Movie] = ()) -> None:
        super().__init__(games)
        self._movies: Tuple[Movie, ...] = tuple(movies)

    @property
    def movies(self) -> Tuple[Movie, ...]:
        return self._movies

    def find_movies_by_category(self, category: str) -> List[Movie]:
        """Movies whose category equals ``category`` exactly, in shelf order."""
        return [movie for movie in self._movies if movie.category == category]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self)}, movies={len(self._movies)})"


__all__ = ["MediaStore"]
