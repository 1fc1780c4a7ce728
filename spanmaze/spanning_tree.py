"""Randomized Prim-style spanning tree over an unweighted undirected graph."""

from __future__ import annotations

import heapq
import itertools
import random
from typing import TYPE_CHECKING

from spanmaze.logger import logger
from spanmaze.model import GraphKind

if TYPE_CHECKING:
    from spanmaze.graph import Graph


def build_spanning_tree(graph: Graph, source: int, rng: random.Random | None = None) -> Graph:
    """Grow a tree from *source*, always extending along a randomly prioritised frontier edge.

    Each candidate edge gets a random key when it is pushed; the heap pops the
    smallest key. Edges whose far end was reached in the meantime are dropped
    when popped. The distribution over trees is not uniform.
    """
    from spanmaze.graph import Graph

    rng = rng or random.Random()
    counter = itertools.count()
    frontier: list[tuple[float, int, int, int]] = []

    def push_frontier(vertex: int) -> None:
        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                heapq.heappush(frontier, (rng.random(), next(counter), vertex, neighbor))

    visited: set[int] = {source}
    tree = Graph(graph.vertex_count(), GraphKind.UNDIRECTED)
    push_frontier(source)

    while frontier:
        _, _, origin, target = heapq.heappop(frontier)
        if target in visited:
            continue
        visited.add(target)
        tree.add_edge(origin, target)
        push_frontier(target)

    logger.debug(
        "Spanning tree from %d: %d of %d vertices reached",
        source,
        len(visited),
        graph.vertex_count(),
    )
    return tree
