"""
Domain models for the SOLID Showcase.

`Record` is the unit queried by the record query service: a name plus an
integer metric (a release year in the video game store examples). `Movie`
is the extra media kind the open/closed example bolts on.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    Immutable named value with an integer attribute.
    """

    name: str = Field(..., description="Display name, matched exactly by name queries.")
    metric: int = Field(..., description="Numeric attribute, e.g. a release year.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def __str__(self) -> str:
        return f"{self.name} ({self.metric})"


class Movie(BaseModel):
    """
    A movie shelved next to the games in a media store.
    """

    name: str = Field(..., description="Movie title.")
    category: str = Field(..., description="Genre label, matched exactly.")

    model_config = {"frozen": True}


__all__ = ["Movie", "Record"]
