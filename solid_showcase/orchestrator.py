"""
Orchestrator for running SOLID demonstrations, optionally profiling each run.

Usage (example from CLI):
    from solid_showcase.orchestrator import run_demonstrations

    results = run_demonstrations(names=["lsp", "isp"], profile=True)
    print(results)
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from solid_showcase.capabilities.output import RecordingSink
from solid_showcase.config import get_settings
from solid_showcase.demonstrations.abstract import Demonstration, DemonstrationResult
from solid_showcase.demonstrations.dependency_inversion import DependencyInversionDemonstration
from solid_showcase.demonstrations.interface_segregation import InterfaceSegregationDemonstration
from solid_showcase.demonstrations.liskov import LiskovSubstitutionDemonstration
from solid_showcase.demonstrations.open_closed import OpenClosedDemonstration
from solid_showcase.demonstrations.single_responsibility import SingleResponsibilityDemonstration
from solid_showcase.domain.exceptions import UnknownDemonstrationError
from solid_showcase.utils.logging import get_logger
from solid_showcase.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _demonstration_factories() -> Dict[str, Callable[[], Demonstration]]:
    """Registry of available demonstrations."""
    return {
        "srp": lambda: SingleResponsibilityDemonstration(),
        "ocp": lambda: OpenClosedDemonstration(),
        "lsp": lambda: LiskovSubstitutionDemonstration(),
        "isp": lambda: InterfaceSegregationDemonstration(),
        "dip": lambda: DependencyInversionDemonstration(),
    }


def available_demonstrations() -> List[str]:
    """List available demonstration names."""
    return sorted(_demonstration_factories().keys())


def _resolve_demonstration(name: str) -> Demonstration:
    factories = _demonstration_factories()
    if name not in factories:
        raise UnknownDemonstrationError(name, available_demonstrations())
    return factories[name]()


def _execute(demonstration: Demonstration) -> dict:
    log.info(f"[DEMO START] {demonstration.name}", extra={"demonstration": demonstration.name})
    sink = RecordingSink()
    try:
        result = demonstration.run(sink)
        log.info(
            f"[DEMO SUCCESS] {demonstration.name}",
            extra={
                "demonstration": demonstration.name,
                "violations": len(result.get("violations", [])),
            },
        )
    except Exception as exc:  # noqa: BLE001 - intentional broad catch to record failures
        log.exception(f"[DEMO FAILED] {demonstration.name}", extra={"demonstration": demonstration.name})
        result = DemonstrationResult(error=str(exc))

    merged = dict(result)
    merged.setdefault("violations", [])
    merged.setdefault("notes", None)
    merged.setdefault("error", None)
    merged.setdefault("extra", {})
    merged["messages"] = list(sink.messages) + list(result.get("messages", []))
    merged["demonstration"] = demonstration.name
    merged["principle"] = demonstration.principle
    merged["description"] = demonstration.description
    return merged


def _profiled_execute(demonstration: Demonstration, sample_interval_ms: int) -> dict:
    with profile_block(demonstration.name, sample_interval_ms=sample_interval_ms) as stats:
        result = _execute(demonstration)
    return _merge_result(result, stats)


def _merge_result(result: dict, stats: ProfileStats) -> dict:
    """Merge a demonstration result with profiler stats, rounding floats for readability."""
    merged = dict(result)
    merged["duration_seconds"] = _round_float(stats.duration_seconds, 4)
    merged["peak_rss_bytes"] = stats.peak_rss_bytes
    merged["peak_traced_bytes"] = stats.peak_traced_bytes
    merged["cpu_percent"] = (
        _round_float(stats.cpu_percent, 1) if stats.cpu_percent is not None else None
    )
    merged["profile"] = {
        "label": stats.label,
        "start_ts": _round_float(stats.start_ts, 3),
        "end_ts": _round_float(stats.end_ts, 3),
    }
    return merged


def run_demonstrations(
    names: Optional[Iterable[str]] = None,
    profile: Optional[bool] = None,
) -> List[dict]:
    """
    Run one or more demonstrations and collect their results.

    Parameters
    ----------
    names : iterable[str] | None
        Demonstration names to run. If None or ["all"], runs all available.
    profile : bool | None
        Wrap each run in ``profile_block``. Defaults to settings.showcase_profile.

    Returns
    -------
    List[dict]
        One result per demonstration, in the requested order. A demonstration
        that raises is reported with ``error`` set rather than aborting the run.

    Raises
    ------
    UnknownDemonstrationError
        If any name is not registered (checked before anything runs).
    """
    settings = get_settings()
    should_profile = settings.showcase_profile if profile is None else profile

    selected = list(names) if names is not None else ["all"]
    if len(selected) == 1 and selected[0] == "all":
        selected = available_demonstrations()

    demonstrations = [_resolve_demonstration(name) for name in selected]

    results: List[dict] = []
    for index, demonstration in enumerate(demonstrations, start=1):
        log.info(
            f"[DEMO {index}/{len(demonstrations)}] {demonstration.principle}",
            extra={"demonstration": demonstration.name, "profile": should_profile},
        )
        if should_profile:
            result = _profiled_execute(demonstration, settings.showcase_sample_interval_ms)
        else:
            result = _execute(demonstration)
        results.append(result)

    failed = [r["demonstration"] for r in results if r.get("error")]
    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(results)} demonstration(s), {len(failed)} failed",
        extra={"demonstrations": selected, "failed": failed},
    )
    return results


__all__ = [
    "available_demonstrations",
    "run_demonstrations",
]
