"""Graph engine: adjacency-set graph, grid builder, bfs, path_to."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spanmaze.errors import InvalidVertexError, UnsupportedOperationError
from spanmaze.model import GraphKind, PathResult

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

UNVISITED = -1


@dataclass
class Graph:
    size: int
    kind: GraphKind = GraphKind.UNDIRECTED
    adjacency: list[set[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"graph size must be non-negative, got {self.size}")
        self.adjacency = [set() for _ in range(self.size)]

    def check_vertex(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self.size:
                raise InvalidVertexError(f"{v} not in [0, {self.size})")

    def vertex_count(self) -> int:
        return self.size

    def add_edge(self, u: int, v: int) -> None:
        self.check_vertex(u, v)
        self.adjacency[u].add(v)
        if self.kind == GraphKind.UNDIRECTED:
            self.adjacency[v].add(u)

    def neighbors(self, v: int) -> list[int]:
        """Adjacent vertices of *v* in ascending order."""
        self.check_vertex(v)
        return sorted(self.adjacency[v])

    def has_edge(self, u: int, v: int) -> bool:
        self.check_vertex(u, v)
        return v in self.adjacency[u]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge once; undirected edges come out as (low, high)."""
        for u in range(self.size):
            for v in sorted(self.adjacency[u]):
                if self.kind == GraphKind.DIRECTED or u < v:
                    yield u, v

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def spanning_tree(self, source: int, rng: random.Random | None = None) -> Graph:
        """Randomized spanning tree rooted at *source*; undirected graphs only."""
        from spanmaze.spanning_tree import build_spanning_tree

        if self.kind == GraphKind.DIRECTED:
            raise UnsupportedOperationError("spanning tree not defined for directed graphs")
        self.check_vertex(source)
        return build_spanning_tree(self, source, rng)

    def describe(self) -> str:
        lines = []
        for v in range(self.size):
            lines.append(f"{v} : " + " ".join(str(n) for n in self.neighbors(v)))
        return "\n".join(lines)


@dataclass
class BfsResult:
    start: int
    distances: list[int] = field(default_factory=list)
    parents: list[int] = field(default_factory=list)

    def farthest(self) -> int:
        """First vertex (lowest id) holding the maximum distance."""
        best = self.start
        best_distance = UNVISITED
        for v, d in enumerate(self.distances):
            if d > best_distance:
                best, best_distance = v, d
        return best

    def unreached(self) -> list[int]:
        return [v for v, d in enumerate(self.distances) if d == UNVISITED]


def build_grid_graph(height: int, width: int) -> Graph:
    """Undirected graph joining every horizontally or vertically adjacent cell."""
    g = Graph(height * width, GraphKind.UNDIRECTED)
    for row in range(height):
        for col in range(width - 1):
            g.add_edge(row * width + col, row * width + col + 1)
    for row in range(height - 1):
        for col in range(width):
            g.add_edge(row * width + col, (row + 1) * width + col)
    return g


def bfs(graph: Graph, start: int) -> BfsResult:
    """BFS from a single start vertex, recording distance and parent of every vertex."""
    graph.check_vertex(start)
    n = graph.vertex_count()
    result = BfsResult(start=start, distances=[UNVISITED] * n, parents=[UNVISITED] * n)
    result.distances[start] = 0
    result.parents[start] = start

    queue: deque[int] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if result.distances[neighbor] == UNVISITED:
                result.distances[neighbor] = result.distances[current] + 1
                result.parents[neighbor] = current
                queue.append(neighbor)

    return result


def path_to(result: BfsResult, target: int) -> PathResult:
    """Reconstruct the path from the BFS start to *target* using the parent pointers."""
    if not 0 <= target < len(result.distances) or result.distances[target] == UNVISITED:
        return PathResult()

    path: list[int] = [target]
    current = target
    while current != result.start:
        current = result.parents[current]
        path.append(current)
    path.reverse()

    return PathResult(path=path, hops=len(path) - 1)
