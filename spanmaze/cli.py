"""CLI entry point: interactive maze session and headless summary."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from spanmaze.config import resolve_config
from spanmaze.errors import InvalidDimensionsError
from spanmaze.geometry import parse_dimensions
from spanmaze.maze import Maze
from spanmaze.model import MazeSummary, PathResult
from spanmaze.output_console import render_summary
from spanmaze.renderer import TerminalRenderer

MENU = "Enter choice (1 - solve, 2 - longest path, 3 - quit)"

app = typer.Typer(no_args_is_help=True)

HeightArg = Annotated[str, typer.Argument(help="Maze height in cells")]
WidthArg = Annotated[str, typer.Argument(help="Maze width in cells")]
SeedOpt = Annotated[int | None, typer.Option("--seed", help="Seed for the maze layout")]
ConfigOpt = Annotated[Path | None, typer.Option("--config", help="Path to spanmaze.yml")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """spanmaze: random spanning-tree mazes in the terminal."""


def _setup_logging(verbose: bool) -> None:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


def _dimensions(height: str, width: str) -> tuple[int, int]:
    try:
        return parse_dimensions(height, width)
    except InvalidDimensionsError as e:
        typer.echo(str(e), err=True)
        raise SystemExit(2)  # noqa: B904


@app.command()
def play(
    height: HeightArg,
    width: WidthArg,
    seed: SeedOpt = None,
    config_path: ConfigOpt = None,
    no_animate: Annotated[
        bool, typer.Option("--no-animate", help="Draw without animation delays")
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Draw a maze and solve it interactively."""
    _setup_logging(verbose)
    h, w = _dimensions(height, width)
    cfg = resolve_config(config_path, seed=seed, animate=False if no_animate else None)

    console = Console(highlight=False)
    renderer = TerminalRenderer(console, cfg.render, height=h)
    maze = Maze(h, w, renderer=renderer, rng=random.Random(cfg.seed))

    renderer.clear_screen()
    maze.generate()
    renderer.park_cursor()

    while True:
        choice = typer.prompt(MENU, default="", show_default=False).strip()
        if choice == "1":
            maze.solve()
        elif choice == "2":
            maze.find_longest_path()
        elif choice == "3":
            typer.echo("Goodbye!")
            return
        renderer.park_cursor()


@app.command()
def summary(
    height: HeightArg,
    width: WidthArg,
    seed: SeedOpt = None,
    config_path: ConfigOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the summary as JSON")] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Generate a maze without drawing it and report both paths."""
    _setup_logging(verbose)
    h, w = _dimensions(height, width)
    cfg = resolve_config(config_path, seed=seed)

    maze = Maze(h, w, rng=random.Random(cfg.seed))
    tree = maze.generate()
    solution = maze.solve()
    longest = maze.find_longest_path()

    result = MazeSummary(
        height=h,
        width=w,
        seed=cfg.seed,
        tree_edges=tree.edge_count(),
        solution=PathResult(path=solution, hops=len(solution) - 1),
        longest=PathResult(path=longest, hops=len(longest) - 1),
    )
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        render_summary(result)
