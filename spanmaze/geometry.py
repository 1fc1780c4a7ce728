"""Grid geometry: dimension parsing, directions, screen placement."""

from __future__ import annotations

from spanmaze.errors import InvalidDimensionsError
from spanmaze.model import COL_INIT, COL_STEP, LINE_INIT, LINE_STEP, Cell, Direction, Point

_DIRECTION_GLYPHS: dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.SOUTH: "v",
    Direction.EAST: ">",
    Direction.WEST: "<",
}


def parse_dimensions(raw_height: str, raw_width: str) -> tuple[int, int]:
    """Parse user-supplied height and width, rejecting non-numbers and values below 1."""
    try:
        height = int(raw_height.strip())
        width = int(raw_width.strip())
    except ValueError:
        raise InvalidDimensionsError(f"{raw_height!r} x {raw_width!r}", not_number=True) from None
    validate_dimensions(height, width)
    return height, width


def validate_dimensions(height: int, width: int) -> None:
    if height < 1 or width < 1:
        raise InvalidDimensionsError(f"{height} x {width}")


def vertex_id(row: int, col: int, width: int) -> int:
    return row * width + col


def make_cell(row: int, col: int, width: int) -> Cell:
    return Cell(
        id=vertex_id(row, col, width),
        location=Point(x=row, y=col),
        screen=Point(x=LINE_INIT + LINE_STEP * row, y=COL_INIT + COL_STEP * col),
    )


def get_direction(source: Cell, target: Cell) -> Direction:
    """Direction of *target* as seen from *source*; the cells are assumed adjacent."""
    if source.row < target.row:
        return Direction.SOUTH
    if source.row > target.row:
        return Direction.NORTH
    if source.col < target.col:
        return Direction.EAST
    return Direction.WEST


def char_for_direction(direction: Direction) -> str:
    return _DIRECTION_GLYPHS[direction]
