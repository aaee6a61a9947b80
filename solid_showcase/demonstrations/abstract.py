"""
Abstract demonstration interfaces and result contracts.

Each SOLID principle gets one demonstration that implements the Demonstration
protocol and returns a DemonstrationResult TypedDict, so the orchestrator and
reporter can treat them uniformly.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, List, Optional, Protocol, TypedDict, runtime_checkable

from solid_showcase.capabilities.output import OutputSink
from solid_showcase.domain.exceptions import UnsupportedOperation


class DemonstrationResult(TypedDict, total=False):
    """
    Outcome of one demonstration run.

    Fields are optional; the orchestrator fills in defaults and profiler data.
    """

    messages: List[str]
    violations: List[str]
    notes: Optional[str]
    error: Optional[str]
    extra: Dict[str, Any]


@runtime_checkable
class Demonstration(Protocol):
    """
    Common interface all demonstrations implement.

    Attributes
    ----------
    name : str
        Short registry key (``srp``, ``ocp``, ...).
    principle : str
        Full principle name.
    description : str
        What the demonstration contrasts.
    """

    name: str
    principle: str
    description: str

    def run(self, sink: OutputSink) -> DemonstrationResult:
        """
        Run the illustration, emitting activity to ``sink``.

        Returns
        -------
        DemonstrationResult
            Violations observed in the legacy design plus any notes.
        """
        ...


class AbstractDemonstration(abc.ABC):
    """
    ABC helper for class-based demonstrations.

    Subclasses set ``name``, ``principle`` and ``description`` and implement
    ``run``. ``_expect_violation`` records an UnsupportedOperation raised by a
    legacy call instead of letting it escape.
    """

    name: str
    principle: str
    description: str

    @abc.abstractmethod
    def run(self, sink: OutputSink) -> DemonstrationResult:  # pragma: no cover - interface only
        """Run the demonstration and return its result."""
        raise NotImplementedError

    @staticmethod
    def _expect_violation(violations: List[str], call: Any, *args: Any) -> None:
        try:
            call(*args)
        except UnsupportedOperation as exc:
            violations.append(str(exc))


__all__ = [
    "AbstractDemonstration",
    "Demonstration",
    "DemonstrationResult",
]
