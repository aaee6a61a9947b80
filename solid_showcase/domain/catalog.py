"""
Built-in sample data used by the CLI and the demonstrations.
"""
from __future__ import annotations

from typing import List

from solid_showcase.domain.models import Movie, Record

_GAMES = (
    ("Chrono Trigger", 1995),
    ("Doom", 1993),
    ("Doom II", 1994),
    ("Super Metroid", 1994),
    ("Half-Life", 1998),
    ("The Legend of Zelda: Ocarina of Time", 1998),
    ("Tetris", 1984),
)

_MOVIES = (
    ("Alien", "sci-fi"),
    ("Heat", "crime"),
    ("Blade Runner", "sci-fi"),
    ("Spirited Away", "animation"),
)


def sample_games() -> List[Record]:
    """Return a fresh list of sample video game records (name, release year)."""
    return [Record(name=name, metric=year) for name, year in _GAMES]


def sample_movies() -> List[Movie]:
    """Return a fresh list of sample movies."""
    return [Movie(name=name, category=category) for name, category in _MOVIES]


__all__ = ["sample_games", "sample_movies"]
