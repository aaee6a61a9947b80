"""
SOLID Showcase - the five SOLID design principles, illustrated.

Each principle is shown with a small contrived domain:

- Single responsibility: a video game store and stateless record filters
- Open/closed: a media store extending the game store with movies
- Liskov substitution: humans and plants as capability-tagged variants
- Interface segregation: playable versus saveable video games
- Dependency inversion: mentors handed their learners

The one piece with real behavior is `RecordQueryService`, an order-preserving
query service over an immutable collection of records.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from solid_showcase.config import Settings, get_settings
from solid_showcase.domain import (
    Movie,
    Record,
    ShowcaseError,
    UnknownDemonstrationError,
    UnsupportedOperation,
)
from solid_showcase.orchestrator import available_demonstrations, run_demonstrations
from solid_showcase.queries import AbstractRecordQuery, MediaStore, RecordQuery, RecordQueryService
from solid_showcase.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Movie",
    "Record",
    # Errors
    "ShowcaseError",
    "UnknownDemonstrationError",
    "UnsupportedOperation",
    # Queries
    "AbstractRecordQuery",
    "MediaStore",
    "RecordQuery",
    "RecordQueryService",
    # Orchestration
    "available_demonstrations",
    "run_demonstrations",
    # Logging
    "configure_logging",
    "get_logger",
]
