"""
Utilities package for the SOLID Showcase.

Exports shared helpers for logging, profiling, and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from solid_showcase.utils.logging import configure_from_settings, configure_logging, get_logger
from solid_showcase.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
