from __future__ import annotations

from typing import Any

import pytest

from solid_showcase import orchestrator
from solid_showcase.domain.exceptions import UnknownDemonstrationError
from solid_showcase.orchestrator import _merge_result, run_demonstrations
from solid_showcase.utils.profiler import ProfileStats

EXPECTED_DURATION = 0.1235
EXPECTED_CPU = 12.3


class _StubDemonstration:
    name = "stub"
    principle = "Stub"
    description = "test demonstration"

    def __init__(self) -> None:
        self.runs = 0

    def run(self, sink) -> dict[str, Any]:
        self.runs += 1
        sink.emit("stubbing")
        return {"violations": ["stub.thing: nope"], "extra": {"runs": self.runs}}


class _FailingDemonstration(_StubDemonstration):
    name = "failing"

    def run(self, sink) -> dict[str, Any]:
        sink.emit("about to fail")
        raise RuntimeError("intentional failure")


@pytest.fixture
def stub_registry(monkeypatch):
    monkeypatch.setattr(
        orchestrator,
        "_demonstration_factories",
        lambda: {"stub": _StubDemonstration, "failing": _FailingDemonstration},
    )


def test_run_all_demonstrations_in_sorted_order():
    results = run_demonstrations(profile=False)

    assert [r["demonstration"] for r in results] == ["dip", "isp", "lsp", "ocp", "srp"]
    assert all(r["error"] is None for r in results)
    assert all(r["messages"] for r in results)


def test_all_keyword_is_equivalent_to_none():
    assert [r["demonstration"] for r in run_demonstrations(["all"], profile=False)] == [
        "dip",
        "isp",
        "lsp",
        "ocp",
        "srp",
    ]


def test_selected_demonstrations_keep_requested_order():
    results = run_demonstrations(["srp", "lsp"], profile=False)
    assert [r["demonstration"] for r in results] == ["srp", "lsp"]


def test_unknown_demonstration_fails_before_running(stub_registry):
    with pytest.raises(UnknownDemonstrationError) as excinfo:
        run_demonstrations(["stub", "nope"], profile=False)
    assert excinfo.value.name == "nope"
    assert excinfo.value.available == ["failing", "stub"]
    assert isinstance(excinfo.value, ValueError)


def test_failures_are_recorded_not_raised(stub_registry):
    results = run_demonstrations(["failing", "stub"], profile=False)

    failed, stub = results
    assert failed["error"] == "intentional failure"
    assert failed["messages"] == ["about to fail"]
    assert failed["violations"] == []
    assert stub["error"] is None
    assert stub["messages"] == ["stubbing"]
    assert stub["violations"] == ["stub.thing: nope"]
    assert stub["principle"] == "Stub"


def test_profile_flag_adds_profiler_fields(stub_registry):
    (result,) = run_demonstrations(["stub"], profile=True)

    assert result["duration_seconds"] >= 0.0
    assert result["peak_rss_bytes"] is not None
    assert result["profile"]["label"] == "stub"


def test_profile_defaults_to_settings(stub_registry, monkeypatch):
    monkeypatch.setenv("SHOWCASE_PROFILE", "1")
    (result,) = run_demonstrations(["stub"])
    assert "duration_seconds" in result

    monkeypatch.setenv("SHOWCASE_PROFILE", "0")
    orchestrator.get_settings.cache_clear()
    (result,) = run_demonstrations(["stub"])
    assert "duration_seconds" not in result


def test_merge_result_rounds_profiler_values():
    stats = ProfileStats(
        label="test",
        start_ts=1.0,
        end_ts=1.123456,
        duration_seconds=0.123456,
        peak_rss_bytes=123,
        peak_traced_bytes=456,
        cpu_percent=12.34,
    )

    merged = _merge_result({"demonstration": "test"}, stats)

    assert merged["duration_seconds"] == EXPECTED_DURATION
    assert merged["cpu_percent"] == EXPECTED_CPU
    assert merged["peak_rss_bytes"] == 123
    assert merged["peak_traced_bytes"] == 456
    assert merged["profile"]["end_ts"] == 1.123
