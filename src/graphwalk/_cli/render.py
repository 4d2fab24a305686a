"""Rich rendering utilities for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from .config import Strategy

if TYPE_CHECKING:
    from rich.console import Console

    from .walk import Step

_METRIC_COLUMNS = {
    Strategy.BFS: "Depth",
    Strategy.CLOSEST: "Distance",
}


def render_steps(steps: list[Step], strategy: Strategy, console: Console) -> None:
    """Render traversal steps as a Rich table.

    Args:
        steps: Steps produced by the traversal.
        strategy: Strategy that produced them, selects the metric column.
        console: Rich Console to output to.

    """
    if not steps:
        console.print("[dim]No vertices visited[/dim]")
        return

    metric_column = _METRIC_COLUMNS.get(strategy)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Vertex", style="bold")
    if metric_column is not None:
        table.add_column(metric_column, justify="right")

    for step in steps:
        row = [str(step.index), escape(step.label)]
        if metric_column is not None:
            row.append(_format_metric(step.metric))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[dim]Total: {len(steps)} vertices ({strategy.value})[/dim]")


def render_order(labels: list[str], console: Console) -> None:
    """Render a topological order as a numbered Rich table."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex", style="bold")
    for index, label in enumerate(labels, start=1):
        table.add_row(str(index), escape(label))
    console.print(table)


def _format_metric(metric: float | None) -> str:
    if metric is None:
        return "-"
    if float(metric).is_integer():
        return str(int(metric))
    return f"{metric:g}"
