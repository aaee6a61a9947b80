from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from solid_showcase.domain.models import Record


def print_records(
    records: Iterable[Record], title: str, console: Optional[Console] = None
) -> None:
    """
    Render records as a rich table, keeping their order.

    Titles and names are user text and are printed literally, never as markup.
    """
    console = console or Console()
    rows = list(records)

    table = Table(title=escape(title), box=box.ROUNDED, caption=f"{len(rows)} record(s)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Metric", justify="right", style="magenta")

    for position, record in enumerate(rows, start=1):
        table.add_row(str(position), escape(record.name), str(record.metric))

    console.print(table)


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render demonstration results as a rich table.

    Profiler columns appear only when the results carry profiler data.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    profiled = "duration_seconds" in results[0]

    table = Table(title="SOLID Showcase", box=box.ROUNDED)
    table.add_column("Demo", style="cyan", no_wrap=True)
    table.add_column("Principle", style="bold")
    table.add_column("Messages", justify="right", style="magenta")
    table.add_column("Violations", justify="right", style="yellow")
    table.add_column("Status")
    if profiled:
        table.add_column("Duration (s)", justify="right", style="green")
        table.add_column("Peak Memory (MB)", justify="right", style="yellow")

    for res in results:
        error = res.get("error")
        status = f"[red]failed: {escape(str(error))}[/red]" if error else "[green]ok[/green]"
        row = [
            escape(res.get("demonstration", "unknown")),
            escape(res.get("principle", "")),
            str(len(res.get("messages", []))),
            str(len(res.get("violations", []))),
            status,
        ]
        if profiled:
            mem_bytes = res.get("peak_rss_bytes") or 0
            row.append(f"{res.get('duration_seconds', 0.0):.4f}")
            row.append(f"{mem_bytes / (1024 * 1024):.2f}")
        table.add_row(*row)

    console.print(table)

    for res in results:
        for violation in res.get("violations", []):
            console.print(f"[yellow]{escape(str(res.get('demonstration')))}[/yellow] violation: {escape(violation)}")
