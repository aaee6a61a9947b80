"""
Video games with segregated capabilities.

Playing and saving are separate interfaces. A game declares only what it
supports, and callers ask ``supports_saving`` instead of trying a save and
catching a failure.
"""

from __future__ import annotations

from typing import Protocol, TypeGuard, runtime_checkable

from pydantic import BaseModel

from solid_showcase.capabilities.output import OutputSink


@runtime_checkable
class Playable(Protocol):
    def play(self, sink: OutputSink) -> None: ...


@runtime_checkable
class Saveable(Protocol):
    def save(self, sink: OutputSink) -> None: ...

    def override_save(self, sink: OutputSink) -> None: ...

    def load(self, sink: OutputSink) -> None: ...


class HardcoreVideoGame(BaseModel):
    """Permadeath game: playable, never saveable."""

    name: str
    release_date: int
    difficulty: str

    model_config = {"frozen": True}

    def play(self, sink: OutputSink) -> None:
        sink.emit(f"Playing hardcore video game {self.name} on {self.difficulty}")


class ConsoleVideoGame(BaseModel):
    """Console game with full save support."""

    name: str
    release_date: int

    model_config = {"frozen": True}

    def play(self, sink: OutputSink) -> None:
        sink.emit(f"Playing console video game {self.name}")

    def save(self, sink: OutputSink) -> None:
        sink.emit(f"Saving console video game {self.name}")

    def override_save(self, sink: OutputSink) -> None:
        sink.emit(f"Overriding a save of console video game {self.name}")

    def load(self, sink: OutputSink) -> None:
        sink.emit(f"Loading console video game {self.name}")


def supports_saving(game: object) -> TypeGuard[Saveable]:
    return isinstance(game, Saveable)


__all__ = [
    "ConsoleVideoGame",
    "HardcoreVideoGame",
    "Playable",
    "Saveable",
    "supports_saving",
]
