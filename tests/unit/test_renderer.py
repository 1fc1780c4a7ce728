"""Tests for the terminal renderer and the null renderer."""

from __future__ import annotations

import io
import random

import pytest
from rich.console import Console

from spanmaze import renderer as renderer_module
from spanmaze.geometry import make_cell
from spanmaze.maze import Maze
from spanmaze.model import Direction, PathColor, RenderConfig
from spanmaze.renderer import NullRenderer, TerminalRenderer


def _terminal(
    config: RenderConfig | None = None, color_system: str | None = None
) -> tuple[TerminalRenderer, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=True, color_system=color_system, width=120)
    config = config or RenderConfig(animate=False)
    return TerminalRenderer(console, config, height=2), buffer


def _at(line: int, column: int) -> str:
    return f"\x1b[{line + 1};{column + 1}H"


class TestTerminalRenderer:
    def test_draw_cell_places_four_sprites(self) -> None:
        r, out = _terminal()
        r.draw_cell(make_cell(0, 0, 3))
        text = out.getvalue()
        assert _at(2, 3) + "+---+" in text
        assert _at(3, 3) + "|" in text
        assert _at(3, 7) + "|" in text
        assert _at(4, 3) + "+---+" in text

    @pytest.mark.parametrize(
        ("direction", "position", "gap"),
        [
            (Direction.NORTH, (4, 8), "   "),
            (Direction.SOUTH, (6, 8), "   "),
            (Direction.EAST, (5, 11), " "),
            (Direction.WEST, (5, 7), " "),
        ],
    )
    def test_erase_wall(self, direction: Direction, position: tuple[int, int], gap: str) -> None:
        r, out = _terminal()
        r.erase_wall(make_cell(1, 1, 3), direction)
        assert out.getvalue() == _at(*position) + gap

    def test_mark_and_clear_cell(self) -> None:
        r, out = _terminal(color_system="standard")
        cell = make_cell(0, 1, 3)
        r.mark_cell(cell, ">")
        marked = out.getvalue()
        assert _at(3, 9) in marked
        assert "\x1b[31m>" in marked

        out.truncate(0)
        out.seek(0)
        r.clear_cell(cell)
        assert out.getvalue() == _at(3, 9) + " "

    def test_path_color_from_config(self) -> None:
        r, out = _terminal(RenderConfig(animate=False, path_color=PathColor.BLUE), "standard")
        r.mark_cell(make_cell(0, 0, 1), "s")
        assert "\x1b[34ms" in out.getvalue()

    def test_park_cursor_below_maze(self) -> None:
        r, out = _terminal()
        r.park_cursor()
        text = out.getvalue()
        assert text.endswith(_at(7, 0))
        assert "\x1b[2K" in text

    def test_clear_screen(self) -> None:
        r, out = _terminal()
        r.clear_screen()
        assert out.getvalue().startswith("\x1b[2J")


class TestAnimation:
    def test_pauses_when_animated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pauses: list[float] = []
        monkeypatch.setattr(renderer_module.time, "sleep", pauses.append)
        r, _ = _terminal(RenderConfig(animate=True, maze_animation_ms=2, path_animation_ms=150))
        cell = make_cell(0, 0, 1)
        r.draw_cell(cell)
        r.mark_cell(cell, "s")
        assert pauses == [0.002, 0.15]

    def test_cell_is_on_screen_before_each_pause(self, monkeypatch: pytest.MonkeyPatch) -> None:
        r, out = _terminal(RenderConfig(animate=True, maze_animation_ms=2, path_animation_ms=150))
        seen: list[str] = []
        monkeypatch.setattr(renderer_module.time, "sleep", lambda _: seen.append(out.getvalue()))
        cell = make_cell(0, 0, 1)
        r.draw_cell(cell)
        r.mark_cell(cell, "s")
        assert seen[0].endswith(_at(4, 3) + "+---+")
        assert seen[1].endswith(_at(3, 5) + "s")

    def test_no_pauses_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pauses: list[float] = []
        monkeypatch.setattr(renderer_module.time, "sleep", pauses.append)
        r, _ = _terminal(RenderConfig(animate=False))
        r.draw_cell(make_cell(0, 0, 1))
        assert pauses == []


class TestRendererIndependence:
    def test_terminal_and_null_renderers_agree(self) -> None:
        r, _ = _terminal()
        drawn = Maze(5, 6, renderer=r, rng=random.Random(3))
        silent = Maze(5, 6, renderer=NullRenderer(), rng=random.Random(3))
        drawn.generate()
        silent.generate()
        assert list(drawn.spanning_tree.edges()) == list(silent.spanning_tree.edges())
        assert drawn.solve() == silent.solve()
        assert drawn.find_longest_path() == silent.find_longest_path()
