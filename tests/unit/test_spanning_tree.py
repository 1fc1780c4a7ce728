"""Tests for the randomized spanning-tree builder."""

from __future__ import annotations

import random

import pytest

from spanmaze.graph import Graph, bfs, build_grid_graph
from spanmaze.model import GraphKind


def _assert_spanning_tree(source: Graph, tree: Graph, root: int) -> None:
    n = source.vertex_count()
    assert tree.vertex_count() == n
    assert tree.kind == GraphKind.UNDIRECTED
    assert tree.edge_count() == n - 1
    assert bfs(tree, root).unreached() == []
    for u, v in tree.edges():
        assert source.has_edge(u, v)


class TestSmallGraphs:
    def test_five_vertex_graph(self, rng: random.Random) -> None:
        g = Graph(5)
        for u, v in [(0, 1), (0, 2), (1, 3), (2, 4), (4, 1), (4, 3)]:
            g.add_edge(u, v)

        tree = g.spanning_tree(0, rng)
        _assert_spanning_tree(g, tree, 0)

    def test_star_keeps_every_edge(self, rng: random.Random) -> None:
        g = Graph(5)
        for u, v in [(0, 1), (0, 2), (0, 3), (2, 4)]:
            g.add_edge(u, v)

        tree = g.spanning_tree(0, rng)
        assert tree.vertex_count() == g.vertex_count()
        assert list(tree.edges()) == list(g.edges())

    def test_single_vertex(self) -> None:
        tree = Graph(1).spanning_tree(0)
        assert tree.vertex_count() == 1
        assert tree.edge_count() == 0

    def test_two_by_two_drops_one_edge(self, rng: random.Random) -> None:
        g = build_grid_graph(2, 2)
        tree = g.spanning_tree(0, rng)
        _assert_spanning_tree(g, tree, 0)
        assert len(set(g.edges()) - set(tree.edges())) == 1

    def test_disconnected_source_graph_covers_component_only(self, rng: random.Random) -> None:
        g = Graph(4)
        g.add_edge(0, 1)
        g.add_edge(2, 3)
        tree = g.spanning_tree(0, rng)
        assert list(tree.edges()) == [(0, 1)]


class TestGridGraphs:
    @pytest.mark.parametrize(("height", "width"), [(1, 5), (5, 1), (3, 3), (6, 9), (20, 20)])
    def test_grid_spanning_tree(self, height: int, width: int, rng: random.Random) -> None:
        g = build_grid_graph(height, width)
        tree = g.spanning_tree(0, rng)
        _assert_spanning_tree(g, tree, 0)

    def test_non_zero_root(self, rng: random.Random) -> None:
        g = build_grid_graph(4, 4)
        tree = g.spanning_tree(10, rng)
        _assert_spanning_tree(g, tree, 10)

    def test_input_graph_unchanged(self, rng: random.Random) -> None:
        g = build_grid_graph(4, 5)
        before = list(g.edges())
        g.spanning_tree(0, rng)
        assert list(g.edges()) == before


class TestRandomness:
    def test_same_seed_same_tree(self) -> None:
        g = build_grid_graph(8, 8)
        first = g.spanning_tree(0, random.Random(7))
        second = g.spanning_tree(0, random.Random(7))
        assert list(first.edges()) == list(second.edges())

    def test_layouts_vary_across_seeds(self) -> None:
        g = build_grid_graph(8, 8)
        layouts = {tuple(g.spanning_tree(0, random.Random(seed)).edges()) for seed in range(10)}
        assert len(layouts) > 1
