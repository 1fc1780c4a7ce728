"""Renderer protocol and implementations for drawing the maze in a terminal."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Protocol

from rich.control import Control, ControlType

from spanmaze.model import LINE_INIT, LINE_STEP, Direction, RenderConfig

if TYPE_CHECKING:
    from rich.console import Console

    from spanmaze.model import Cell

NORTH_SPRITE = "+---+"
SOUTH_SPRITE = "+---+"
EAST_SPRITE = "|"
WEST_SPRITE = "|"

SOURCE_MARK = "s"
TARGET_MARK = "t"


class Renderer(Protocol):
    """Drawing primitives the maze core emits while carving and solving."""

    def draw_cell(self, cell: Cell) -> None:
        ...

    def erase_wall(self, cell: Cell, direction: Direction) -> None:
        """Remove the wall of *cell* facing *direction*."""
        ...

    def mark_cell(self, cell: Cell, symbol: str) -> None:
        ...

    def clear_cell(self, cell: Cell) -> None:
        """Blank the middle of *cell*."""
        ...


class NullRenderer:
    """Renderer that draws nothing, for headless runs."""

    def draw_cell(self, cell: Cell) -> None:
        pass

    def erase_wall(self, cell: Cell, direction: Direction) -> None:
        pass

    def mark_cell(self, cell: Cell, symbol: str) -> None:
        pass

    def clear_cell(self, cell: Cell) -> None:
        pass


class TerminalRenderer:
    """Cursor-addressed rendering through a rich Console.

    Cursor control codes are only emitted when the console is attached to a
    terminal, so redirected output stays readable.
    """

    def __init__(self, console: Console, config: RenderConfig | None = None, height: int = 0) -> None:
        self.console = console
        self.config = config or RenderConfig()
        self.height = height

    def clear_screen(self) -> None:
        self.console.control(Control.clear(), Control.home())

    def park_cursor(self) -> None:
        """Move below the maze and wipe the menu lines so the screen does not scroll."""
        line = LINE_INIT + LINE_STEP * self.height + 1
        self.console.control(Control.move_to(0, line))
        for offset in range(3):
            self.console.control(
                Control.move_to(0, line + offset),
                Control((ControlType.ERASE_IN_LINE, 2)),
            )
        self.console.control(Control.move_to(0, line))

    def draw_cell(self, cell: Cell) -> None:
        x, y = cell.screen.x, cell.screen.y
        self._put(x, y, NORTH_SPRITE)
        self._put(x + 1, y, WEST_SPRITE)
        self._put(x + 1, y + len(NORTH_SPRITE) - 1, EAST_SPRITE)
        self._put(x + 2, y, SOUTH_SPRITE)
        self._pause(self.config.maze_animation_ms)

    def erase_wall(self, cell: Cell, direction: Direction) -> None:
        x, y = cell.screen.x, cell.screen.y
        gap = " " * (len(NORTH_SPRITE) - 2)
        if direction == Direction.NORTH:
            self._put(x, y + 1, gap)
        elif direction == Direction.SOUTH:
            self._put(x + 2, y + 1, gap)
        elif direction == Direction.EAST:
            self._put(x + 1, y + len(NORTH_SPRITE) - 1, " ")
        else:
            self._put(x + 1, y, " ")

    def mark_cell(self, cell: Cell, symbol: str) -> None:
        self._put(cell.screen.x + 1, cell.screen.y + 2, symbol, style=self.config.path_color.value)
        self._pause(self.config.path_animation_ms)

    def clear_cell(self, cell: Cell) -> None:
        self._put(cell.screen.x + 1, cell.screen.y + 2, " ")

    def _put(self, line: int, column: int, text: str, style: str | None = None) -> None:
        self.console.control(Control.move_to(column, line))
        self.console.print(text, style=style, end="", markup=False, highlight=False)

    def _pause(self, millis: int) -> None:
        if self.config.animate and millis > 0:
            self.console.file.flush()
            time.sleep(millis / 1000)
