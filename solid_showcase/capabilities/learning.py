"""
Learners and mentors.

A Mentor depends on the Learner protocol and is handed its learner (and its
output sink) at construction; it never builds a collaborator itself.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from solid_showcase.capabilities.output import OutputSink


@runtime_checkable
class Learner(Protocol):
    def learn(self, sink: OutputSink) -> None: ...


class Student:
    subject = "something new"

    def learn(self, sink: OutputSink) -> None:
        sink.emit(f"I'm learning {self.subject}")


class JavascriptStudent(Student):
    subject = "Javascript"


class Mentor:
    """Teaches whichever learner it was given."""

    def __init__(self, name: str, learner: Learner, sink: OutputSink) -> None:
        self._name = name
        self._learner = learner
        self._sink = sink

    @property
    def name(self) -> str:
        return self._name

    @property
    def learner(self) -> Learner:
        return self._learner

    def teach(self) -> None:
        self._sink.emit(f"{self._name} is teaching")
        self._learner.learn(self._sink)


__all__ = ["JavascriptStudent", "Learner", "Mentor", "Student"]
