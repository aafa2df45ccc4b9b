"""
Input validation for flow networks and floor-plan markers.

Two families of errors live here:

- GraphContractError: a graph handed to the flow algorithms is malformed
  (missing terminals, terminals outside the vertex set, neighbors without a
  capacity entry). These are programmer errors and are never turned into a
  negative answer.
- ValidationError: a configuration value or labeled grid is malformed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Optional

if TYPE_CHECKING:
    from .graph import FlowGraph


class GraphContractError(RuntimeError):
    """Base exception for broken flow-network invariants."""

    pass


class MissingTerminalError(GraphContractError):
    """Raised when the source or sink is None."""

    pass


class TerminalNotInVertexSetError(GraphContractError):
    """Raised when the source or sink is not a member of the vertex set."""

    pass


class DegenerateTerminalsError(GraphContractError):
    """Raised when a flow is requested from a vertex to itself."""

    pass


class UnknownVertexError(GraphContractError):
    """Raised when a handle does not name a vertex of the graph."""

    pass


class MissingCapacityError(GraphContractError):
    """Raised when a vertex lists a neighbor it has no capacity for."""

    pass


class ValidationError(ValueError):
    """Base exception for configuration and grid validation errors."""

    pass


class InvalidMarkerError(ValidationError):
    """Raised when cell markers are malformed or collide."""

    pass


class InvalidCellError(ValidationError):
    """Raised when a labeled grid contains an unknown character."""

    pass


def validate_flow_network(
    graph: FlowGraph,
    source: Optional[int],
    sink: Optional[int],
    vertices: AbstractSet[int],
    *,
    caller: str,
) -> None:
    """
    Check the preconditions shared by the flow algorithms.

    Args:
        graph: Graph the handles refer to
        source: Source handle
        sink: Sink handle
        vertices: Vertex set the algorithm is restricted to
        caller: Name of the calling operation, used in messages

    Raises:
        MissingTerminalError: If source or sink is None
        UnknownVertexError: If a handle in the vertex set, or one of its
            neighbors, is not a vertex of the graph
        TerminalNotInVertexSetError: If source or sink is not in the set
        MissingCapacityError: If a neighbor has no capacity entry
    """
    if source is None or sink is None:
        raise MissingTerminalError(f"{caller}() was passed None source or sink")

    if source not in vertices or sink not in vertices:
        raise TerminalNotInVertexSetError(
            f"{caller}() was passed source or sink not in the vertex set"
        )

    for v in vertices:
        if not graph.has_vertex(v):
            raise UnknownVertexError(f"{caller}() was passed unknown vertex {v!r}")
        weights = graph.weights(v)
        for nbr in graph.neighbors(v):
            if not graph.has_vertex(nbr):
                raise UnknownVertexError(
                    f"{caller}() was passed vertex {v} with unknown neighbor {nbr!r}"
                )
            if nbr not in weights:
                raise MissingCapacityError(
                    f"{caller}() was passed invalid vertex {v}: "
                    f"no capacity for neighbor {nbr}"
                )


def validate_markers(blocked: str, black: str, red: str) -> tuple[str, str, str]:
    """
    Validate the blocked/black/red cell markers.

    Args:
        blocked: Marker for blocked cells
        black: Marker for black open cells
        red: Marker for red open cells

    Returns:
        The validated (blocked, black, red) tuple

    Raises:
        InvalidMarkerError: If a marker is not a single character, is a
            newline, or two markers are equal
    """
    markers = {"blocked": blocked, "black": black, "red": red}
    for name, marker in markers.items():
        if not isinstance(marker, str) or len(marker) != 1:
            raise InvalidMarkerError(
                f"{name} marker must be a single character, got {marker!r}"
            )
        if marker == "\n":
            raise InvalidMarkerError(f"{name} marker cannot be a newline")

    if len(set(markers.values())) != len(markers):
        raise InvalidMarkerError(
            f"markers must be distinct, got blocked={blocked!r}, black={black!r}, red={red!r}"
        )

    return blocked, black, red


__all__ = [
    "GraphContractError",
    "MissingTerminalError",
    "TerminalNotInVertexSetError",
    "DegenerateTerminalsError",
    "UnknownVertexError",
    "MissingCapacityError",
    "ValidationError",
    "InvalidMarkerError",
    "InvalidCellError",
    "validate_flow_network",
    "validate_markers",
]
