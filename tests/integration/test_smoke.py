"""
End-to-end smoke tests for the `solid-showcase` CLI.

These run the real Typer application in-process against the built-in sample
catalog and every registered demonstration.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from solid_showcase.main import app

EXPECTED_DEMONSTRATIONS = ["dip", "isp", "lsp", "ocp", "srp"]
EXIT_UNKNOWN_DEMONSTRATION = 2

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    """Keep INFO logs out of captured output so JSON stays parseable."""
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SHOWCASE_PROFILE", "false")


class TestInfoCommand:
    def test_info_shows_settings(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "log_level=WARNING" in result.output
        assert "dip, isp, lsp, ocp, srp" in result.output


class TestQueryCommand:
    def test_query_json_matches_canonical_example(self):
        result = runner.invoke(
            app,
            ["query", "--metric", "1994", "--name", "Doom", "--older-than", "1994", "--json"],
        )
        assert result.exit_code == 0, result.output

        payload = json.loads(result.stdout)
        assert payload["metric == 1994"] == [
            {"name": "Doom II", "metric": 1994},
            {"name": "Super Metroid", "metric": 1994},
        ]
        assert payload["name == 'Doom'"] == [{"name": "Doom", "metric": 1993}]
        assert payload["metric < 1994"] == [
            {"name": "Doom", "metric": 1993},
            {"name": "Tetris", "metric": 1984},
        ]

    def test_query_without_options_lists_catalog(self):
        result = runner.invoke(app, ["query", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert list(payload) == ["catalog"]
        assert payload["catalog"][0] == {"name": "Chrono Trigger", "metric": 1995}

    def test_query_table_output(self):
        result = runner.invoke(app, ["query", "--newer-than", "1997"])
        assert result.exit_code == 0
        assert "metric > 1997" in result.output
        assert "Half-Life" in result.output

    def test_query_with_no_matches_prints_empty_table(self):
        result = runner.invoke(app, ["query", "--metric", "1800"])
        assert result.exit_code == 0
        assert "0 record(s)" in result.output

    def test_query_name_with_markup_syntax_is_printed_literally(self):
        result = runner.invoke(app, ["query", "--name", "[/bold]"])
        assert result.exit_code == 0, result.output
        assert "name == '[/bold]'" in result.output
        assert "0 record(s)" in result.output


class TestDemoCommand:
    def test_demo_list(self):
        result = runner.invoke(app, ["demo", "--principle", "list"])
        assert result.exit_code == 0
        assert "dip, isp, lsp, ocp, srp" in result.output

    def test_demo_all_json(self):
        result = runner.invoke(app, ["demo", "--json"])
        assert result.exit_code == 0, result.output

        payload = json.loads(result.stdout)
        assert [r["demonstration"] for r in payload] == EXPECTED_DEMONSTRATIONS
        by_name = {r["demonstration"]: r for r in payload}
        assert len(by_name["lsp"]["violations"]) == 1
        assert len(by_name["isp"]["violations"]) == 2
        assert all(r["error"] is None for r in payload)

    def test_demo_single_profiled_table(self):
        result = runner.invoke(app, ["demo", "-p", "lsp", "--profile"])
        assert result.exit_code == 0, result.output
        assert "Liskov substitution" in result.output
        assert "Duration (s)" in result.output
        assert "plants don't breathe" in result.output

    def test_demo_unknown_principle_exits_with_error(self):
        result = runner.invoke(app, ["demo", "-p", "xyz"])
        assert result.exit_code == EXIT_UNKNOWN_DEMONSTRATION
        assert "Unknown demonstration 'xyz'" in result.output

    def test_demo_narrate_replays_messages_to_the_log(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        result = runner.invoke(app, ["demo", "-p", "lsp", "--narrate"])
        assert result.exit_code == 0, result.output
        assert "solid_showcase.activity | [lsp] Ada: I'm breathing" in result.output
        assert "solid_showcase.activity | [lsp] Fern can: photosynthesizer" in result.output

    def test_demo_without_narrate_keeps_activity_out_of_the_log(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        result = runner.invoke(app, ["demo", "-p", "lsp"])
        assert result.exit_code == 0, result.output
        assert "solid_showcase.activity" not in result.output
