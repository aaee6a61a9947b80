"""
Interface segregation: one fat PC game interface versus Playable + Saveable.
"""

from __future__ import annotations

from typing import List, Union

from solid_showcase.capabilities.games import (
    ConsoleVideoGame,
    HardcoreVideoGame,
    supports_saving,
)
from solid_showcase.capabilities.legacy import LegacyHardcoreVideoGame
from solid_showcase.capabilities.output import OutputSink
from solid_showcase.demonstrations.abstract import AbstractDemonstration, DemonstrationResult


class InterfaceSegregationDemonstration(AbstractDemonstration):
    name: str = "isp"
    principle: str = "Interface segregation"
    description: str = "Games declare only the play/save capabilities they support."

    def run(self, sink: OutputSink) -> DemonstrationResult:
        violations: List[str] = []

        legacy = LegacyHardcoreVideoGame("Demon's Souls", 2009, "brutal")
        legacy.play(sink)
        legacy.save(sink)
        self._expect_violation(violations, legacy.override_save, sink)
        self._expect_violation(violations, legacy.load, sink)

        games: List[Union[HardcoreVideoGame, ConsoleVideoGame]] = [
            HardcoreVideoGame(name="Demon's Souls", release_date=2009, difficulty="brutal"),
            ConsoleVideoGame(name="Chrono Trigger", release_date=1995),
        ]
        saveable = 0
        for game in games:
            game.play(sink)
            if supports_saving(game):
                game.save(sink)
                game.override_save(sink)
                game.load(sink)
                saveable += 1
            else:
                sink.emit(f"{game.name} has no save support")

        return DemonstrationResult(
            violations=violations,
            notes="Save support is a separate capability queried by presence.",
            extra={"games": len(games), "saveable": saveable},
        )


__all__ = ["InterfaceSegregationDemonstration"]
