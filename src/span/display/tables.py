"""Rich table formatters for batch results (--fmt rich)."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from span.display.charts import sparkline
from span.display.numbers import DEFAULT_FORMAT, format_number

console = Console()


def display_sequence(title: str, values: list[float],
                     fmt: str = DEFAULT_FORMAT) -> None:
    console.print()
    console.print(Panel(f"[bold]{title}[/]", subtitle=f"{len(values)} values"))

    if not values:
        console.print("[yellow]Nothing to show.[/]")
        return

    table = Table(border_style="dim")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Value", justify="right")
    for i, v in enumerate(values):
        table.add_row(str(i), format_number(v, fmt))
    console.print(table)

    if len(values) > 1:
        console.print(f"\n  Trend: [cyan]{sparkline(values)}[/]")
    console.print()


def display_subintervals(title: str, pairs: list[tuple[float, float]],
                         fmt: str = DEFAULT_FORMAT) -> None:
    console.print()
    console.print(Panel(f"[bold]{title}[/]", subtitle=f"{len(pairs)} subintervals"))

    if not pairs:
        console.print("[yellow]Nothing to show.[/]")
        return

    table = Table(border_style="dim")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Width", justify="right")
    for i, (start, end) in enumerate(pairs):
        table.add_row(str(i), format_number(start, fmt), format_number(end, fmt),
                      format_number(end - start, fmt))
    console.print(table)
    console.print()


def display_range(lo: float, hi: float, fmt: str = DEFAULT_FORMAT) -> None:
    table = Table(title="Encompassing Interval", show_header=False, border_style="dim")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Min", format_number(lo, fmt))
    table.add_row("Max", format_number(hi, fmt))
    table.add_row("Width", format_number(hi - lo, fmt))
    console.print()
    console.print(table)
    console.print()
