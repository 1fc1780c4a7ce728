"""Canonical model: cells, directions, solved state, config."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Sprite layout on the terminal: each cell is 5 columns by 3 lines and
# shares its border with the next cell.
LINE_INIT = 2
LINE_STEP = 2
COL_INIT = 3
COL_STEP = 4


class GraphKind(StrEnum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Direction(StrEnum):
    """Relative position of a neighbouring cell, derived on demand."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class SolvedKind(StrEnum):
    UNSOLVED = "unsolved"
    SHORTEST_PATH_SHOWN = "shortest_path_shown"
    LONGEST_PATH_SHOWN = "longest_path_shown"


class PathColor(StrEnum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class Cell(BaseModel):
    """A maze cell. `location` is (row, col); `screen` is (line, column) of the sprite."""

    model_config = ConfigDict(frozen=True)

    id: int
    location: Point
    screen: Point

    @property
    def row(self) -> int:
        return self.location.x

    @property
    def col(self) -> int:
        return self.location.y


class SolvedState(BaseModel):
    kind: SolvedKind = SolvedKind.UNSOLVED
    path: list[int] = Field(default_factory=list)

    @property
    def is_shown(self) -> bool:
        return self.kind != SolvedKind.UNSOLVED


class PathResult(BaseModel):
    path: list[int] = Field(default_factory=list)
    hops: int = 0


class RenderConfig(BaseModel):
    animate: bool = True
    maze_animation_ms: int = Field(default=2, ge=0)
    path_animation_ms: int = Field(default=150, ge=0)
    path_color: PathColor = PathColor.RED


class MazeConfig(BaseModel):
    seed: int | None = None
    render: RenderConfig = Field(default_factory=RenderConfig)


class MazeSummary(BaseModel):
    """Assembled by the headless `summary` command."""

    height: int
    width: int
    seed: int | None = None
    tree_edges: int
    solution: PathResult
    longest: PathResult
