"""
Tests for the shortest augmenting path search.
"""

from __future__ import annotations

import random
from typing import Optional

import pytest

from domino_tiling import FlowGraph, shortest_augmenting_path
from domino_tiling.validation import (
    MissingCapacityError,
    MissingTerminalError,
    TerminalNotInVertexSetError,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _random_graph(n: int, density: float, seed: int) -> FlowGraph:
    """Random digraph without self-loops, capacities in {0, 1, 2}."""
    rng = random.Random(seed)
    graph = FlowGraph()
    graph.add_vertices(n)
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < density:
                graph.add_edge(u, v, rng.choice([0, 1, 2]))
    return graph


def _brute_force_shortest(graph: FlowGraph, source: int, sink: int) -> Optional[int]:
    """Fewest edges over all simple positive-capacity paths, by enumeration."""
    best: Optional[int] = None

    def dfs(u: int, visited: set[int], length: int) -> None:
        nonlocal best
        if u == sink:
            if best is None or length < best:
                best = length
            return
        for v in graph.neighbors(u):
            if v not in visited and graph.capacity(u, v) > 0:
                visited.add(v)
                dfs(v, visited, length + 1)
                visited.remove(v)

    dfs(source, {source}, 0)
    return best


# ---------------------------------------------------------------------------
# Small hand-crafted graphs
# ---------------------------------------------------------------------------


class TestSmallGraphs:
    """Hand-crafted path searches."""

    def test_direct_edge(self):
        graph = FlowGraph()
        s, t = graph.add_vertices(2)
        graph.add_edge(s, t)
        assert shortest_augmenting_path(graph, s, t) == [s, t]

    def test_prefers_fewer_edges_over_weight(self):
        """A heavy two-edge path loses to a light one-edge path."""
        graph = FlowGraph()
        s, a, t = graph.add_vertices(3)
        graph.add_edge(s, a, 100)
        graph.add_edge(a, t, 100)
        graph.add_edge(s, t, 1)
        assert shortest_augmenting_path(graph, s, t) == [s, t]

    def test_skips_saturated_edges(self):
        """Edges with capacity 0 are not traversed."""
        graph = FlowGraph()
        s, a, t = graph.add_vertices(3)
        graph.add_edge(s, t, 0)
        graph.add_edge(s, a, 1)
        graph.add_edge(a, t, 1)
        assert shortest_augmenting_path(graph, s, t) == [s, a, t]

    def test_no_path_returns_none(self):
        graph = FlowGraph()
        s, a, t = graph.add_vertices(3)
        graph.add_edge(s, a, 1)
        graph.add_edge(a, t, 0)
        assert shortest_augmenting_path(graph, s, t) is None

    def test_edges_are_directed(self):
        graph = FlowGraph()
        s, t = graph.add_vertices(2)
        graph.add_edge(t, s, 1)
        assert shortest_augmenting_path(graph, s, t) is None

    def test_source_equals_sink(self):
        """A vertex reaches itself with the empty path."""
        graph = FlowGraph()
        s = graph.add_vertex()
        assert shortest_augmenting_path(graph, s, s) == [s]

    def test_restricted_to_vertex_set(self):
        """Vertices outside the set are never visited."""
        graph = FlowGraph()
        s, a, b, t = graph.add_vertices(4)
        graph.add_edge(s, a)
        graph.add_edge(a, t)
        graph.add_edge(s, b)
        graph.add_edge(b, t)
        path = shortest_augmenting_path(graph, s, t, {s, b, t})
        assert path == [s, b, t]
        assert shortest_augmenting_path(graph, s, t, {s, t}) is None

    def test_accepts_any_iterable_vertex_set(self):
        graph = FlowGraph()
        s, t = graph.add_vertices(2)
        graph.add_edge(s, t)
        assert shortest_augmenting_path(graph, s, t, [s, t]) == [s, t]

    def test_graph_not_modified(self):
        graph = FlowGraph()
        s, a, t = graph.add_vertices(3)
        graph.add_edge(s, a, 2)
        graph.add_edge(a, t, 3)
        before = sorted(graph.edges())
        shortest_augmenting_path(graph, s, t)
        assert sorted(graph.edges()) == before


class TestContract:
    """Precondition violations raise instead of returning None."""

    def test_none_source(self):
        graph = FlowGraph()
        graph.add_vertices(2)
        with pytest.raises(MissingTerminalError, match="shortest_augmenting_path"):
            shortest_augmenting_path(graph, None, 1)

    def test_sink_not_in_set(self):
        graph = FlowGraph()
        graph.add_vertices(3)
        with pytest.raises(TerminalNotInVertexSetError):
            shortest_augmenting_path(graph, 0, 2, {0, 1})

    def test_neighbor_without_capacity(self):
        graph = FlowGraph.from_adjacency([[1], []], [{}, {}])
        with pytest.raises(MissingCapacityError):
            shortest_augmenting_path(graph, 0, 1)


# ---------------------------------------------------------------------------
# Brute-force comparison
# ---------------------------------------------------------------------------


class TestAgainstBruteForce:
    """BFS path length matches exhaustive enumeration of simple paths."""

    @pytest.mark.parametrize("seed", range(40))
    def test_minimal_edge_count(self, seed):
        graph = _random_graph(7, 0.3, seed)
        source, sink = 0, 6
        path = shortest_augmenting_path(graph, source, sink)
        expected = _brute_force_shortest(graph, source, sink)

        if expected is None:
            assert path is None
            return

        assert path is not None
        assert len(path) - 1 == expected
        assert path[0] == source
        assert path[-1] == sink
        assert len(set(path)) == len(path)
        for u, v in zip(path, path[1:]):
            assert graph.capacity(u, v) > 0
