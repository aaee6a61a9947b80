"""
Dependency inversion: a gentleman who builds his own student versus a mentor
handed any Learner.
"""

from __future__ import annotations

from typing import List

from solid_showcase.capabilities.learning import JavascriptStudent, Learner, Mentor, Student
from solid_showcase.capabilities.legacy import Gentleman
from solid_showcase.capabilities.output import OutputSink
from solid_showcase.demonstrations.abstract import AbstractDemonstration, DemonstrationResult


class DependencyInversionDemonstration(AbstractDemonstration):
    name: str = "dip"
    principle: str = "Dependency inversion"
    description: str = "Mentor receives its learner instead of constructing one."

    def __init__(self, mentor_name: str = "Alan") -> None:
        self._mentor_name = mentor_name

    def run(self, sink: OutputSink) -> DemonstrationResult:
        Gentleman(self._mentor_name, sink).teach_javascript()

        learners: List[Learner] = [Student(), JavascriptStudent()]
        for learner in learners:
            Mentor(self._mentor_name, learner, sink).teach()

        return DemonstrationResult(
            violations=[],
            notes="Gentleman can only ever teach the student it builds; Mentor takes any Learner.",
            extra={"learners": [type(learner).__name__ for learner in learners]},
        )


__all__ = ["DependencyInversionDemonstration"]
