"""
Output sinks: where illustrations report what they are doing.

Components never print; they are handed an OutputSink and emit to it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from solid_showcase.utils.logging import ACTIVITY_LOGGER, get_logger


@runtime_checkable
class OutputSink(Protocol):
    """Receives one human-readable activity message at a time."""

    def emit(self, message: str) -> None: ...


class LoggingSink:
    """Forward every message to a logger at a fixed level."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._logger = logger or get_logger(ACTIVITY_LOGGER)
        self._level = level

    def emit(self, message: str) -> None:
        self._logger.log(self._level, message)


class RecordingSink:
    """Keep messages in arrival order."""

    def __init__(self) -> None:
        self._messages: List[str] = []

    def emit(self, message: str) -> None:
        self._messages.append(message)

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(self._messages)

    def clear(self) -> None:
        self._messages.clear()


__all__ = ["LoggingSink", "OutputSink", "RecordingSink"]
