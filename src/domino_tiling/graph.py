"""
Directed capacity graph stored as a vertex arena.

Vertices are integer handles allocated by a FlowGraph. Each vertex owns a set
of outgoing neighbors and a mapping from neighbor to integer capacity. All
vertices of one graph live and die with the graph object, so there is no
per-vertex ownership to track.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Sequence

from .validation import MissingCapacityError, UnknownVertexError


class FlowGraph:
    """
    Arena of vertices with directed, integer-capacity edges.

    Vertex identity is the handle returned by add_vertex(). Two vertices with
    the same neighbors and capacities are still distinct vertices.

    Example:
        graph = FlowGraph()
        s, a, t = graph.add_vertices(3)
        graph.add_edge(s, a, 2)
        graph.add_edge(a, t, 1)
        graph.capacity(s, a)  # 2
    """

    def __init__(self) -> None:
        self._neighbors: list[set[int]] = []
        self._weights: list[dict[int, int]] = []

    @classmethod
    def from_adjacency(
        cls,
        neighbors: Sequence[Iterable[int]],
        weights: Sequence[Mapping[int, int]],
    ) -> FlowGraph:
        """
        Build a graph from raw adjacency and capacity tables.

        Entry i of each table describes vertex i. The tables are taken as
        given: a neighbor without a capacity entry is accepted here and
        rejected by the flow algorithms.

        Args:
            neighbors: Neighbor handles of each vertex
            weights: Capacity of each neighbor, per vertex

        Returns:
            New FlowGraph with len(neighbors) vertices
        """
        if len(neighbors) != len(weights):
            raise ValueError(
                f"neighbors and weights must have the same length, "
                f"got {len(neighbors)} and {len(weights)}"
            )
        graph = cls()
        for nbrs, wts in zip(neighbors, weights):
            graph._neighbors.append(set(nbrs))
            graph._weights.append(dict(wts))
        return graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_vertex(self) -> int:
        """Allocate a new vertex and return its handle."""
        self._neighbors.append(set())
        self._weights.append({})
        return len(self._neighbors) - 1

    def add_vertices(self, count: int) -> list[int]:
        """Allocate count new vertices and return their handles."""
        return [self.add_vertex() for _ in range(count)]

    def add_edge(self, u: int, v: int, capacity: int = 1) -> None:
        """
        Add the directed edge u -> v, replacing any existing capacity.

        Args:
            u: Tail vertex
            v: Head vertex
            capacity: Edge capacity (non-negative)
        """
        self._check(u)
        self._check(v)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._neighbors[u].add(v)
        self._weights[u][v] = int(capacity)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return len(self._neighbors)

    @property
    def num_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._neighbors)

    def __len__(self) -> int:
        return len(self._neighbors)

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)  # type: ignore[arg-type]

    def has_vertex(self, v: int) -> bool:
        return isinstance(v, int) and 0 <= v < len(self._neighbors)

    def has_edge(self, u: int, v: int) -> bool:
        return self.has_vertex(u) and v in self._neighbors[u]

    def vertices(self) -> range:
        """All vertex handles."""
        return range(len(self._neighbors))

    def neighbors(self, v: int) -> set[int]:
        """Outgoing neighbors of v. The returned set must not be mutated."""
        self._check(v)
        return self._neighbors[v]

    def weights(self, v: int) -> dict[int, int]:
        """Neighbor -> capacity mapping of v. Must not be mutated."""
        self._check(v)
        return self._weights[v]

    def capacity(self, u: int, v: int) -> int:
        """
        Capacity of edge u -> v.

        Raises:
            MissingCapacityError: If u has no capacity entry for v
        """
        self._check(u)
        try:
            return self._weights[u][v]
        except KeyError:
            raise MissingCapacityError(f"vertex {u} has no capacity for {v}") from None

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Iterate (u, v, capacity) over every edge with a capacity entry."""
        for u, wts in enumerate(self._weights):
            for v in self._neighbors[u]:
                if v in wts:
                    yield u, v, wts[v]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set_capacity(self, u: int, v: int, capacity: int) -> None:
        """Overwrite the capacity of an existing edge u -> v."""
        if not self.has_edge(u, v):
            raise KeyError(f"no edge {u} -> {v}")
        self._weights[u][v] = capacity

    def add_capacity(self, u: int, v: int, delta: int) -> None:
        """Add delta to the capacity of an existing edge u -> v."""
        if not self.has_edge(u, v):
            raise KeyError(f"no edge {u} -> {v}")
        self._weights[u][v] += delta

    def _check(self, v: int) -> None:
        if not self.has_vertex(v):
            raise UnknownVertexError(f"unknown vertex {v!r}")

    def __repr__(self) -> str:
        return f"FlowGraph(vertices={self.num_vertices}, edges={self.num_edges})"


__all__ = ["FlowGraph"]
