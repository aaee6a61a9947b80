"""
Pytest configuration for the SOLID Showcase.

Provides fixtures for:
- Sample record collections (including the canonical video game example)
- Settings cache isolation between tests
- Root logger isolation for tests that configure logging
"""

from __future__ import annotations

import logging
from typing import Generator, List

import pytest

from solid_showcase.capabilities.output import RecordingSink
from solid_showcase.config import get_settings
from solid_showcase.domain.models import Record


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_root_logger() -> Generator[None, None, None]:
    """
    Drop the handler installed by configure_logging and restore the root level.

    dictConfig names its handler after the config key ("default"), which keeps
    pytest's own capture handlers untouched.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if h.get_name() == "default"]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


@pytest.fixture
def classic_games() -> List[Record]:
    """
    The canonical three-game collection.
    """
    return [
        Record(name="Chrono Trigger", metric=1995),
        Record(name="Doom", metric=1993),
        Record(name="Doom II", metric=1994),
    ]


@pytest.fixture
def games_with_duplicates() -> List[Record]:
    """
    A collection with repeated years, a repeated name and an exact duplicate.
    """
    return [
        Record(name="Doom", metric=1993),
        Record(name="Myst", metric=1993),
        Record(name="Doom", metric=2016),
        Record(name="Myst", metric=1993),
        Record(name="Quake", metric=1996),
        Record(name="doom", metric=1993),
    ]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
