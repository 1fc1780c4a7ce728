"""Console output: summary table of the corner path and the longest path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from spanmaze.model import MazeSummary, PathResult

_MAX_SHOWN_VERTICES = 12


def render_summary(summary: MazeSummary, console: Console | None = None) -> None:
    """Print a TTY-friendly summary of a generated maze."""
    console = console or Console()

    title = f"Maze {summary.height}x{summary.width}"
    if summary.seed is not None:
        title += f" (seed {summary.seed})"
    table = Table(title=title)
    table.add_column("Query", style="bold")
    table.add_column("Steps", justify="right")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Path")
    table.add_row("solve", *_path_columns(summary.solution))
    table.add_row("longest path", *_path_columns(summary.longest))
    console.print(table)

    console.print(f"\nCells: {summary.height * summary.width}, tree edges: {summary.tree_edges}")


def _path_columns(result: PathResult) -> tuple[str, str, str, str]:
    return (
        str(result.hops),
        str(result.path[0]),
        str(result.path[-1]),
        format_path(result.path),
    )


def format_path(path: list[int]) -> str:
    if len(path) <= _MAX_SHOWN_VERTICES:
        return " -> ".join(str(v) for v in path)
    head = " -> ".join(str(v) for v in path[: _MAX_SHOWN_VERTICES // 2])
    tail = " -> ".join(str(v) for v in path[-(_MAX_SHOWN_VERTICES // 2) :])
    return f"{head} -> ... -> {tail}"
