"""
Capability interfaces and the variants that implement them.

`legacy` is deliberately not re-exported here; import it explicitly.
"""

from solid_showcase.capabilities.games import (
    ConsoleVideoGame,
    HardcoreVideoGame,
    Playable,
    Saveable,
    supports_saving,
)
from solid_showcase.capabilities.learning import JavascriptStudent, Learner, Mentor, Student
from solid_showcase.capabilities.living import (
    Breather,
    Human,
    LivingBeing,
    Photosynthesizer,
    Plant,
    Worker,
    capabilities_of,
    parse_living_being,
)
from solid_showcase.capabilities.output import LoggingSink, OutputSink, RecordingSink

__all__ = [
    # Output
    "LoggingSink",
    "OutputSink",
    "RecordingSink",
    # Living beings
    "Breather",
    "Human",
    "LivingBeing",
    "Photosynthesizer",
    "Plant",
    "Worker",
    "capabilities_of",
    "parse_living_being",
    # Games
    "ConsoleVideoGame",
    "HardcoreVideoGame",
    "Playable",
    "Saveable",
    "supports_saving",
    # Learning
    "JavascriptStudent",
    "Learner",
    "Mentor",
    "Student",
]
