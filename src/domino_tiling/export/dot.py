"""
DOT (Graphviz) export for flow networks.

Generates DOT format representations of a FlowGraph or a CheckerboardGraph
for inspection with Graphviz tools (dot, neato, ...). Cells are placed at
their grid position when coordinates are known.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..flow import FlowResult
    from ..graph import FlowGraph
    from ..tiling.checkerboard import CheckerboardGraph
    from ..types import Coordinate


def to_dot(
    graph: FlowGraph,
    *,
    name: str = "G",
    coordinates: Optional[dict[int, Coordinate]] = None,
    labels: Optional[dict[int, str]] = None,
    include_capacities: bool = True,
    include_zero_capacity: bool = False,
    node_attrs: Optional[dict[str, str]] = None,
    get_node_attrs: Optional[dict[int, dict[str, str]]] = None,
    flow: Optional[FlowResult] = None,
    flow_color: str = "blue",
) -> str:
    """
    Export a flow network to DOT format.

    Args:
        graph: Network to export
        name: Name of the graph (default "G")
        coordinates: (row, column) per vertex; adds fixed pos attributes
        labels: Custom label per vertex (default: the handle)
        include_capacities: Label edges with their capacity
        include_zero_capacity: Also emit edges with capacity 0
        node_attrs: Additional default node attributes
        get_node_attrs: Extra attributes per vertex
        flow: Flow result whose carrying edges are highlighted
        flow_color: Color of edges carrying flow

    Returns:
        DOT format string representation of the network
    """
    lines = [f"digraph {_quote_id(name)} {{"]

    all_node_attrs: dict[str, str] = {"shape": "circle"}
    if node_attrs:
        all_node_attrs.update(node_attrs)
    lines.append(_format_attrs_block("node", all_node_attrs))
    lines.append("")

    # Nodes
    for v in graph.vertices():
        node_data: dict[str, str] = {}
        if labels and v in labels:
            node_data["label"] = labels[v]
        if coordinates and v in coordinates:
            # Graphviz pos format: "x,y!" (! means fixed), y grows upward
            row, col = coordinates[v]
            node_data["pos"] = f"{col},{-row}!"
        if get_node_attrs and v in get_node_attrs:
            node_data.update(get_node_attrs[v])
        lines.append(f"  {v}{_format_attrs(node_data)};")

    lines.append("")

    # Edges
    for u, v, capacity in sorted(graph.edges()):
        if capacity == 0 and not include_zero_capacity:
            continue
        edge_data: dict[str, str] = {}
        if include_capacities:
            edge_data["label"] = str(capacity)
        if flow is not None and flow.flows.get((u, v), 0) > 0:
            edge_data["color"] = flow_color
            edge_data["penwidth"] = "2"
        lines.append(f"  {u} -> {v}{_format_attrs(edge_data)};")

    lines.append("}")
    return "\n".join(lines)


def to_dot_checkerboard(
    board: CheckerboardGraph,
    *,
    name: str = "checkerboard",
    flow: Optional[FlowResult] = None,
    include_capacities: bool = False,
) -> str:
    """
    Export a CheckerboardGraph with cells colored and placed on the grid.

    Source and sink are labeled "s" and "t" and have no position.

    Args:
        board: Board to export
        name: Name of the graph
        flow: Matching to highlight, usually board.max_matching()
        include_capacities: Label edges with their capacity

    Returns:
        DOT format string
    """
    labels = {v: f"{r},{c}" for v, (r, c) in board.coordinates.items()}
    labels[board.source] = "s"
    labels[board.sink] = "t"

    attrs: dict[int, dict[str, str]] = {}
    for v in board.black.values():
        attrs[v] = {"style": "filled", "fillcolor": "black", "fontcolor": "white"}
    for v in board.red.values():
        attrs[v] = {"style": "filled", "fillcolor": "red"}

    return to_dot(
        board.graph,
        name=name,
        coordinates=board.coordinates,
        labels=labels,
        include_capacities=include_capacities,
        get_node_attrs=attrs,
        flow=flow,
    )


def _quote_id(s: str) -> str:
    """Quote a DOT identifier if necessary."""
    if not s:
        return '""'

    # Simple identifiers don't need quoting
    if s.isidentifier() or s.isdigit():
        return s

    escaped = s.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_attrs(attrs: dict[str, str]) -> str:
    """Format attributes as DOT attribute list."""
    if not attrs:
        return ""

    parts = []
    for key, value in attrs.items():
        if " " in value or "," in value or "!" in value:
            parts.append(f'{key}="{value}"')
        else:
            parts.append(f"{key}={_quote_id(value)}")

    return " [" + ", ".join(parts) + "]"


def _format_attrs_block(element: str, attrs: dict[str, str]) -> str:
    """Format a default attributes block."""
    parts = [f"{key}={_quote_id(value)}" for key, value in attrs.items()]
    return f"  {element} [{', '.join(parts)}];"


__all__ = [
    "to_dot",
    "to_dot_checkerboard",
]
