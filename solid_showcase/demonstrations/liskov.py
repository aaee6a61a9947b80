"""
Liskov substitution: a plant that "breathes" by raising versus a plant that
simply isn't a breather.
"""

from __future__ import annotations

from typing import List

from solid_showcase.capabilities.legacy import LegacyHuman, LegacyLivingBeing, LegacyPlant
from solid_showcase.capabilities.living import Breather, Human, Plant, capabilities_of
from solid_showcase.capabilities.output import OutputSink
from solid_showcase.demonstrations.abstract import AbstractDemonstration, DemonstrationResult


class LiskovSubstitutionDemonstration(AbstractDemonstration):
    name: str = "lsp"
    principle: str = "Liskov substitution"
    description: str = "Breathing as a capability instead of a base-class method plants override."

    def run(self, sink: OutputSink) -> DemonstrationResult:
        violations: List[str] = []

        legacy: List[LegacyLivingBeing] = [
            LegacyHuman("Ada", 36, "engineer"),
            LegacyPlant("Fern", 2, "green"),
        ]
        for being in legacy:
            self._expect_violation(violations, being.breathe, sink)

        beings = [Human(name="Ada", age=36, job="engineer"), Plant(name="Fern", age=2, color="green")]
        for being in beings:
            if isinstance(being, Breather):
                being.breathe(sink)
            sink.emit(f"{being.name} can: {', '.join(sorted(capabilities_of(being)))}")

        return DemonstrationResult(
            violations=violations,
            notes="Only variants that can honor Breather implement it.",
            extra={"breathers": sum(isinstance(b, Breather) for b in beings)},
        )


__all__ = ["LiskovSubstitutionDemonstration"]
