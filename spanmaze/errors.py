"""Error kinds raised by the graph layer and the maze core."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_DIMENSIONS = "invalid_dimensions"
    INVALID_DIMENSIONS_NOT_NUMBER = "invalid_dimensions_not_number"
    INVALID_VERTEX = "invalid_vertex"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    INCONSISTENT_TREE = "inconsistent_tree"
    NOT_GENERATED = "not_generated"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_DIMENSIONS: "invalid dimensions: non (positive) integer values",
    ErrorKind.INVALID_DIMENSIONS_NOT_NUMBER: "invalid dimensions: non-numeric values",
    ErrorKind.INVALID_VERTEX: "invalid vertex or vertices",
    ErrorKind.UNSUPPORTED_OPERATION: "operation not supported for this graph",
    ErrorKind.INCONSISTENT_TREE: "spanning tree is not connected",
    ErrorKind.NOT_GENERATED: "maze has not been generated yet",
}


class MazeError(Exception):
    """Base class for every precondition violation in spanmaze."""

    kind: ErrorKind

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = self.kind.message if detail is None else f"{self.kind.message}: {detail}"
        super().__init__(text)

    def __str__(self) -> str:
        return f"Error: {self.args[0]}"


class InvalidDimensionsError(MazeError):
    """Raised when a maze height or width is not a positive integer."""

    kind = ErrorKind.INVALID_DIMENSIONS

    def __init__(self, detail: str | None = None, *, not_number: bool = False) -> None:
        if not_number:
            self.kind = ErrorKind.INVALID_DIMENSIONS_NOT_NUMBER
        super().__init__(detail)


class InvalidVertexError(MazeError, IndexError):
    kind = ErrorKind.INVALID_VERTEX


class UnsupportedOperationError(MazeError):
    kind = ErrorKind.UNSUPPORTED_OPERATION


class TreeConsistencyError(MazeError):
    """Raised when a BFS over the spanning tree leaves a vertex unreached."""

    kind = ErrorKind.INCONSISTENT_TREE


class MazeNotGeneratedError(MazeError):
    kind = ErrorKind.NOT_GENERATED
