"""Maze core: generation by randomized spanning tree, solving, and tree diameter.

The maze owns a dense list of cells, the full grid graph, the spanning tree
derived from it, and the solved state. Every traversal runs over the stored
spanning tree and reports what it does to the renderer; the renderer never
influences which path or tree is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanmaze.errors import MazeNotGeneratedError, TreeConsistencyError
from spanmaze.geometry import char_for_direction, get_direction, make_cell, validate_dimensions
from spanmaze.graph import bfs, build_grid_graph, path_to
from spanmaze.logger import logger
from spanmaze.model import SolvedKind, SolvedState
from spanmaze.renderer import SOURCE_MARK, TARGET_MARK, NullRenderer

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

    from spanmaze.graph import BfsResult, Graph
    from spanmaze.model import Cell
    from spanmaze.renderer import Renderer


class Maze:
    def __init__(
        self,
        height: int,
        width: int,
        renderer: Renderer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        validate_dimensions(height, width)
        self.height = height
        self.width = width
        self.renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self.rng = rng
        self.cells: list[Cell] = [
            make_cell(row, col, width) for row in range(height) for col in range(width)
        ]
        self.grid: Graph | None = None
        self._tree: Graph | None = None
        self.solved_state = SolvedState()

    @classmethod
    def initialize(
        cls,
        height: int,
        width: int,
        renderer: Renderer | None = None,
        rng: random.Random | None = None,
    ) -> Maze:
        return cls(height, width, renderer=renderer, rng=rng)

    @property
    def size(self) -> int:
        return self.height * self.width

    @property
    def target(self) -> int:
        return self.size - 1

    @property
    def spanning_tree(self) -> Graph:
        if self._tree is None:
            raise MazeNotGeneratedError()
        return self._tree

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row * self.width + col]

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self) -> Graph:
        """Build the grid graph, take a spanning tree from the top-left cell and carve it."""
        self.grid = build_grid_graph(self.height, self.width)
        self._tree = self.grid.spanning_tree(0, self.rng)
        self.solved_state = SolvedState()
        logger.debug(
            "Generated %dx%d maze: %d grid edges, %d tree edges",
            self.height,
            self.width,
            self.grid.edge_count(),
            self._tree.edge_count(),
        )

        for cell in self.cells:
            self.renderer.draw_cell(cell)
        self._carve()
        return self._tree

    def _carve(self) -> int:
        """DFS over the tree from vertex 0, erasing the wall crossed by every tree edge."""
        tree = self.spanning_tree
        visited = [False] * self.size
        visited[0] = True
        stack: list[tuple[int, Iterator[int]]] = [(0, iter(tree.neighbors(0)))]
        erased = 0

        while stack:
            vertex, pending = stack[-1]
            for neighbor in pending:
                if not visited[neighbor]:
                    source, target = self.cells[vertex], self.cells[neighbor]
                    self.renderer.erase_wall(source, get_direction(source, target))
                    erased += 1
                    visited[neighbor] = True
                    stack.append((neighbor, iter(tree.neighbors(neighbor))))
                    break
            else:
                stack.pop()

        logger.debug("Carved %d walls", erased)
        return erased

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def solve(self) -> list[int]:
        """Find the unique tree path from the top-left to the bottom-right cell."""
        tree = self.spanning_tree
        self._prime_solved_state()

        path = self._dfs_path(tree, 0, self.target)
        self._render_path(path)
        self.solved_state = SolvedState(kind=SolvedKind.SHORTEST_PATH_SHOWN, path=path)
        logger.debug("Solved maze in %d steps", len(path) - 1)
        return list(path)

    def find_longest_path(self) -> list[int]:
        """Find a diameter of the spanning tree with two BFS passes."""
        tree = self.spanning_tree
        self._prime_solved_state()

        first = self._checked_bfs(tree, 0)
        endpoint = first.farthest()
        second = self._checked_bfs(tree, endpoint)
        path = path_to(second, second.farthest()).path
        if path[0] > path[-1]:
            path.reverse()

        self._render_path(path)
        self.solved_state = SolvedState(kind=SolvedKind.LONGEST_PATH_SHOWN, path=path)
        logger.debug("Longest path %d -> %d, %d steps", path[0], path[-1], len(path) - 1)
        return list(path)

    @staticmethod
    def _dfs_path(tree: Graph, source: int, target: int) -> list[int]:
        visited = [False] * tree.vertex_count()
        path: list[int] = []
        stack: list[Iterator[int]] = []

        def enter(vertex: int) -> None:
            visited[vertex] = True
            path.append(vertex)
            stack.append(iter(tree.neighbors(vertex)))

        enter(source)
        while stack:
            if path[-1] == target:
                return path
            for neighbor in stack[-1]:
                if not visited[neighbor]:
                    enter(neighbor)
                    break
            else:
                stack.pop()
                visited[path.pop()] = False

        raise TreeConsistencyError(f"no path from {source} to {target}")

    @staticmethod
    def _checked_bfs(tree: Graph, start: int) -> BfsResult:
        result = bfs(tree, start)
        missing = result.unreached()
        if missing:
            raise TreeConsistencyError(f"{len(missing)} vertices unreachable from {start}")
        return result

    # ------------------------------------------------------------------
    # Solved-state machine
    # ------------------------------------------------------------------

    def _prime_solved_state(self) -> None:
        """Clear whichever path is shown so that two paths never overlap."""
        if self.solved_state.is_shown:
            self._clear_path(self.solved_state.path)
            self.solved_state = SolvedState()

    def _render_path(self, path: list[int]) -> None:
        if len(path) == 1:
            self.renderer.mark_cell(self.cells[path[0]], SOURCE_MARK)
            return

        for i, (current, following) in enumerate(zip(path, path[1:])):
            cell = self.cells[current]
            if i == 0:
                self.renderer.mark_cell(cell, SOURCE_MARK)
            else:
                direction = get_direction(cell, self.cells[following])
                self.renderer.mark_cell(cell, char_for_direction(direction))
        self.renderer.mark_cell(self.cells[path[-1]], TARGET_MARK)

    def _clear_path(self, path: list[int]) -> None:
        for vertex in path:
            self.renderer.clear_cell(self.cells[vertex])
