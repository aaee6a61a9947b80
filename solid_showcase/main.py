from __future__ import annotations

import json
import sys
from typing import Dict, List, Optional

import typer

from solid_showcase.capabilities.output import LoggingSink
from solid_showcase.config import get_settings
from solid_showcase.domain.catalog import sample_games
from solid_showcase.domain.exceptions import ShowcaseError
from solid_showcase.domain.models import Record
from solid_showcase.orchestrator import available_demonstrations, run_demonstrations
from solid_showcase.queries.service import RecordQueryService
from solid_showcase.reporter import print_records, print_results
from solid_showcase.utils.logging import configure_from_settings

app = typer.Typer(help="SOLID Showcase CLI.")


def _setup_logging() -> None:
    configure_from_settings(get_settings())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"profile={settings.showcase_profile} "
        f"sample_interval_ms={settings.showcase_sample_interval_ms} | "
        f"demonstrations={', '.join(available_demonstrations())}"
    )


@app.command()
def query(
    metric: Optional[int] = typer.Option(None, "--metric", "-m", help="Exact release year."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Exact game name."),
    older_than: Optional[int] = typer.Option(
        None, "--older-than", help="Games released strictly before this year."
    ),
    newer_than: Optional[int] = typer.Option(
        None, "--newer-than", help="Games released strictly after this year."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
) -> None:
    """
    Query the built-in video game catalog. Each option runs its own query.
    """
    _setup_logging()
    service = RecordQueryService(sample_games())

    answers: Dict[str, List[Record]] = {}
    if metric is not None:
        answers[f"metric == {metric}"] = service.find_by_metric(metric)
    if name is not None:
        answers[f"name == {name!r}"] = service.find_by_name(name)
    if older_than is not None:
        answers[f"metric < {older_than}"] = service.find_older_than(older_than)
    if newer_than is not None:
        answers[f"metric > {newer_than}"] = service.find_newer_than(newer_than)
    if not answers:
        answers["catalog"] = list(service.records)

    if as_json:
        payload = {
            label: [record.model_dump() for record in records]
            for label, records in answers.items()
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for label, records in answers.items():
        print_records(records, title=label)


@app.command()
def demo(
    principle: str = typer.Option(
        "all",
        "--principle",
        "-p",
        help=f"Demonstration to run ({', '.join(available_demonstrations())}, all, list).",
    ),
    profile: Optional[bool] = typer.Option(
        None, "--profile/--no-profile", help="Profile each run (default from settings)."
    ),
    narrate: bool = typer.Option(
        False, "--narrate", help="Also log every activity message as it happens."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
) -> None:
    """
    Run one or all SOLID demonstrations.
    """
    _setup_logging()

    if principle == "list":
        typer.echo("Available demonstrations: " + ", ".join(available_demonstrations()))
        return

    try:
        results = run_demonstrations(names=[principle], profile=profile)
    except ShowcaseError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    if narrate:
        sink = LoggingSink()
        for result in results:
            for message in result["messages"]:
                sink.emit(f"[{result['demonstration']}] {message}")

    if as_json:
        typer.echo(json.dumps(results, indent=2, default=str))
        return

    print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
