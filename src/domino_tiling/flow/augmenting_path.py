"""
Shortest augmenting path search.

Edmonds-Karp needs the augmenting path with the fewest edges, not the one
with the smallest weight, so the search is a plain breadth-first search over
edges with strictly positive capacity.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, AbstractSet, Iterable, Optional

from ..validation import validate_flow_network

if TYPE_CHECKING:
    from ..graph import FlowGraph


def _as_vertex_set(graph: FlowGraph, vertices: Optional[Iterable[int]]) -> AbstractSet[int]:
    if vertices is None:
        return set(graph.vertices())
    if isinstance(vertices, (set, frozenset)):
        return vertices
    return set(vertices)


def _bfs_path(
    graph: FlowGraph,
    source: int,
    sink: int,
    vertices: AbstractSet[int],
) -> Optional[list[int]]:
    """BFS without precondition checks. Returns source -> sink path or None."""
    queue = deque([source])
    visited = {source}
    prev: dict[int, int] = {}

    while queue:
        cur = queue.popleft()
        if cur == sink:
            break
        weights = graph.weights(cur)
        for nbr in graph.neighbors(cur):
            # Saturated edges are not part of the residual network
            if weights[nbr] <= 0:
                continue
            if nbr in visited or nbr not in vertices:
                continue
            visited.add(nbr)
            prev[nbr] = cur
            queue.append(nbr)

    if sink not in visited:
        return None

    path = [sink]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def shortest_augmenting_path(
    graph: FlowGraph,
    source: Optional[int],
    sink: Optional[int],
    vertices: Optional[Iterable[int]] = None,
) -> Optional[list[int]]:
    """
    Find a shortest (fewest edges) augmenting path from source to sink.

    Only edges with capacity > 0 are traversed, and the search never leaves
    the vertex set.

    Args:
        graph: Graph whose capacities are the current residual capacities
        source: Start vertex
        sink: End vertex
        vertices: Vertex set to search in (default: every vertex)

    Returns:
        List of handles [source, ..., sink] with no repeated vertex, or None
        if sink is unreachable.

    Raises:
        GraphContractError: If source/sink are missing or not in the vertex
            set, or a vertex lists a neighbor without a capacity entry.

    Example:
        >>> from domino_tiling import FlowGraph
        >>> g = FlowGraph()
        >>> s, a, t = g.add_vertices(3)
        >>> g.add_edge(s, a); g.add_edge(a, t); g.add_edge(s, t, 0)
        >>> shortest_augmenting_path(g, s, t)
        [0, 1, 2]
    """
    vertex_set = _as_vertex_set(graph, vertices)
    validate_flow_network(graph, source, sink, vertex_set, caller="shortest_augmenting_path")
    assert source is not None and sink is not None
    return _bfs_path(graph, source, sink, vertex_set)


__all__ = ["shortest_augmenting_path"]
