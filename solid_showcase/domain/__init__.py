"""
Domain package for the SOLID Showcase.

Exports the core value models, the sample catalog and the exception hierarchy.
Keep this package focused on data definitions and validation concerns.
"""

from solid_showcase.domain.catalog import sample_games, sample_movies
from solid_showcase.domain.exceptions import (
    ShowcaseError,
    UnknownDemonstrationError,
    UnsupportedOperation,
)
from solid_showcase.domain.models import Movie, Record

__all__ = [
    "Movie",
    "Record",
    "sample_games",
    "sample_movies",
    "ShowcaseError",
    "UnknownDemonstrationError",
    "UnsupportedOperation",
]
