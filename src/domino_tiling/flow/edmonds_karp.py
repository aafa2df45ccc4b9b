"""
Maximum flow with Edmonds-Karp.

The input graph is never modified. Each call builds its own residual copy of
the graph (restricted to the requested vertex set, with a zero-capacity
reverse edge added wherever one is missing), augments along breadth-first
shortest paths until the sink is unreachable, then reads the flow value off
the edges leaving the source.

Complexity: O(V * E^2) in general. On the unit-capacity bipartite networks
built for tiling, the number of rounds is at most the matching size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from ..graph import FlowGraph
from ..validation import DegenerateTerminalsError, validate_flow_network
from .augmenting_path import _as_vertex_set, _bfs_path


@dataclass
class FlowResult:
    """
    Result of a maximum-flow computation.

    Attributes:
        value: Total flow leaving the source
        flows: Flow carried by each original edge (u, v) inside the vertex
            set, keyed by the caller's handles
        rounds: Number of augmenting paths used
    """

    value: int = 0
    flows: dict[tuple[int, int], int] = field(default_factory=dict)
    rounds: int = 0

    def saturated(self) -> list[tuple[int, int]]:
        """Edges carrying positive flow."""
        return [edge for edge, f in self.flows.items() if f > 0]


def build_residual_graph(
    graph: FlowGraph,
    vertices: Optional[Iterable[int]] = None,
) -> tuple[FlowGraph, dict[int, int]]:
    """
    Build a residual copy of graph restricted to a vertex set.

    Every edge u -> v with both ends in the set is copied with its capacity.
    For every copied edge without a reverse partner, v -> u is added with
    capacity 0 so later augmentations can cancel flow.

    Args:
        graph: Graph to copy
        vertices: Vertex set (default: every vertex)

    Returns:
        (residual, mapping) where mapping sends each original handle to its
        handle in the residual graph.
    """
    vertex_set = _as_vertex_set(graph, vertices)
    residual = FlowGraph()
    mapping: dict[int, int] = {}
    for v in sorted(vertex_set):
        mapping[v] = residual.add_vertex()

    for u in vertex_set:
        weights = graph.weights(u)
        for v in graph.neighbors(u):
            if v in mapping:
                residual.add_edge(mapping[u], mapping[v], weights[v])

    for u in vertex_set:
        for v in graph.neighbors(u):
            if v in mapping and not residual.has_edge(mapping[v], mapping[u]):
                residual.add_edge(mapping[v], mapping[u], 0)

    return residual, mapping


def solve_max_flow(
    graph: FlowGraph,
    source: Optional[int],
    sink: Optional[int],
    vertices: Optional[Iterable[int]] = None,
    *,
    on_augment: Optional[Callable[[list[int], int], None]] = None,
) -> FlowResult:
    """
    Compute a maximum source -> sink flow with Edmonds-Karp.

    Args:
        graph: Graph with non-negative integer capacities
        source: Source vertex
        sink: Sink vertex
        vertices: Vertex set the flow may use (default: every vertex)
        on_augment: Called as on_augment(path, amount) after each
            augmentation, with the path in the caller's handles

    Returns:
        FlowResult with the flow value, per-edge flows and round count

    Raises:
        GraphContractError: If the network violates the flow preconditions
        DegenerateTerminalsError: If source == sink
    """
    vertex_set = _as_vertex_set(graph, vertices)
    validate_flow_network(graph, source, sink, vertex_set, caller="max_flow")
    assert source is not None and sink is not None
    if source == sink:
        raise DegenerateTerminalsError("max_flow() was passed identical source and sink")

    residual, mapping = build_residual_graph(graph, vertex_set)
    inverse = {r: v for v, r in mapping.items()}
    res_source = mapping[source]
    res_sink = mapping[sink]
    res_vertices = set(residual.vertices())

    rounds = 0
    while True:
        path = _bfs_path(residual, res_source, res_sink, res_vertices)
        if path is None:
            break

        bottleneck = min(residual.capacity(u, v) for u, v in zip(path, path[1:]))
        for u, v in zip(path, path[1:]):
            residual.add_capacity(u, v, -bottleneck)
            residual.add_capacity(v, u, bottleneck)
        rounds += 1

        if on_augment is not None:
            on_augment([inverse[r] for r in path], bottleneck)

    # Added reverse edges count with original capacity 0
    source_weights = graph.weights(source)
    value = 0
    for r_nbr in residual.neighbors(res_source):
        original = source_weights.get(inverse[r_nbr], 0)
        value += original - residual.capacity(res_source, r_nbr)

    flows: dict[tuple[int, int], int] = {}
    for u in vertex_set:
        weights = graph.weights(u)
        for v in graph.neighbors(u):
            if v not in mapping:
                continue
            original = weights[v]
            remaining = residual.capacity(mapping[u], mapping[v])
            flows[(u, v)] = min(max(original - remaining, 0), original)

    return FlowResult(value=value, flows=flows, rounds=rounds)


def max_flow(
    graph: FlowGraph,
    source: Optional[int],
    sink: Optional[int],
    vertices: Optional[Iterable[int]] = None,
) -> int:
    """
    Maximum flow value from source to sink.

    See solve_max_flow() for arguments and errors.

    Example:
        >>> g = FlowGraph()
        >>> s, a, b, t = g.add_vertices(4)
        >>> for u, v in [(s, a), (s, b), (a, t), (b, t)]:
        ...     g.add_edge(u, v, 1)
        >>> max_flow(g, s, t)
        2
    """
    return solve_max_flow(graph, source, sink, vertices).value


__all__ = [
    "FlowResult",
    "build_residual_graph",
    "solve_max_flow",
    "max_flow",
]
