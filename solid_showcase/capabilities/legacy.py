"""
Legacy designs that break SOLID principles.

Kept so the demonstrations can show each failure next to its fix in
`living`, `games` and `learning`. Nothing outside the demonstrations should
build on these classes.
"""

from __future__ import annotations

import abc

from solid_showcase.capabilities.output import OutputSink
from solid_showcase.domain.exceptions import UnsupportedOperation


class LegacyLivingBeing:
    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age

    def breathe(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm breathing")


class LegacyHuman(LegacyLivingBeing):
    def __init__(self, name: str, age: int, job: str) -> None:
        super().__init__(name, age)
        self.job = job

    def work(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm working ({self.job})")


class LegacyPlant(LegacyLivingBeing):
    """Not substitutable for LegacyLivingBeing: ``breathe`` always raises."""

    def __init__(self, name: str, age: int, color: str) -> None:
        super().__init__(name, age)
        self.color = color

    def photosynthesize(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm photosynthesizing")

    def breathe(self, sink: OutputSink) -> None:
        raise UnsupportedOperation(type(self).__name__, "breathe", "plants don't breathe")


class PCVideoGame(abc.ABC):
    """One fat interface every PC game must implement in full."""

    @abc.abstractmethod
    def play(self, sink: OutputSink) -> None: ...

    @abc.abstractmethod
    def save(self, sink: OutputSink) -> None: ...

    @abc.abstractmethod
    def override_save(self, sink: OutputSink) -> None: ...

    @abc.abstractmethod
    def load(self, sink: OutputSink) -> None: ...


class LegacyHardcoreVideoGame(PCVideoGame):
    def __init__(self, name: str, release_date: int, difficulty: str) -> None:
        self.name = name
        self.release_date = release_date
        self.difficulty = difficulty

    def play(self, sink: OutputSink) -> None:
        sink.emit(f"Playing hardcore video game {self.name} on {self.difficulty}")

    def save(self, sink: OutputSink) -> None:
        sink.emit(f"Saving hardcore video game {self.name}")

    def override_save(self, sink: OutputSink) -> None:
        raise UnsupportedOperation(
            type(self).__name__, "override_save", "a hardcore save can't be overridden"
        )

    def load(self, sink: OutputSink) -> None:
        raise UnsupportedOperation(type(self).__name__, "load", "a hardcore game can't be loaded")


class LegacyJavascriptStudent:
    def learn_javascript(self, sink: OutputSink) -> None:
        sink.emit("I'm learning Javascript")


class Gentleman:
    """Hard-wired to one concrete student type it builds itself."""

    def __init__(self, name: str, sink: OutputSink) -> None:
        self.name = name
        self._sink = sink
        self._student = LegacyJavascriptStudent()

    @property
    def student(self) -> LegacyJavascriptStudent:
        return self._student

    def teach_javascript(self) -> None:
        self._sink.emit(f"{self.name} is teaching")
        self._student.learn_javascript(self._sink)


__all__ = [
    "Gentleman",
    "LegacyHardcoreVideoGame",
    "LegacyHuman",
    "LegacyJavascriptStudent",
    "LegacyLivingBeing",
    "LegacyPlant",
    "PCVideoGame",
]
