"""Shared test fixtures."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

import pytest

from spanmaze.model import Cell, Direction


@dataclass
class RecordingRenderer:
    """Renderer stub that records every primitive and tracks which cells carry a marker."""

    drawn: list[int] = field(default_factory=list)
    erased: list[tuple[int, Direction]] = field(default_factory=list)
    marks: list[tuple[int, str]] = field(default_factory=list)
    cleared: list[int] = field(default_factory=list)
    marked: dict[int, str] = field(default_factory=dict)

    def draw_cell(self, cell: Cell) -> None:
        self.drawn.append(cell.id)

    def erase_wall(self, cell: Cell, direction: Direction) -> None:
        self.erased.append((cell.id, direction))

    def mark_cell(self, cell: Cell, symbol: str) -> None:
        self.marks.append((cell.id, symbol))
        self.marked[cell.id] = symbol

    def clear_cell(self, cell: Cell) -> None:
        self.cleared.append(cell.id)
        self.marked.pop(cell.id, None)


@pytest.fixture()
def recorder() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
