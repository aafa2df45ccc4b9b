"""
domino-tiling: Decide domino tilings of floor plans with maximum flow.

A floor plan (text grid of blocked "#" and open cells) is tileable by 1x2
dominoes iff the bipartite graph of its checkerboard-colored open cells has
a perfect matching. The matching is computed as a maximum flow with
Edmonds-Karp.

Available modules:
- graph: FlowGraph vertex arena with integer edge capacities
- flow: shortest augmenting paths and Edmonds-Karp max flow
- tiling: checkerboard coloring, bipartite builder and tiling decision
- export: Graphviz DOT dump of networks and boards
"""

__version__ = "0.1.0"

from .base import BaseSolver
from .flow import (
    FlowResult,
    build_residual_graph,
    max_flow,
    shortest_augmenting_path,
    solve_max_flow,
)
from .graph import FlowGraph
from .tiling import (
    CheckerboardGraph,
    ColoringWarning,
    TilingSolver,
    color_floor,
    decide_tiling,
    find_tiling,
)
from .types import CellColor, Coordinate, Domino, Event, EventType
from .validation import (
    DegenerateTerminalsError,
    GraphContractError,
    InvalidCellError,
    InvalidMarkerError,
    MissingCapacityError,
    MissingTerminalError,
    TerminalNotInVertexSetError,
    UnknownVertexError,
    ValidationError,
)

__all__ = [
    "__version__",
    # Types
    "CellColor",
    "Coordinate",
    "Domino",
    "Event",
    "EventType",
    # Graph model
    "FlowGraph",
    # Flow
    "FlowResult",
    "build_residual_graph",
    "max_flow",
    "shortest_augmenting_path",
    "solve_max_flow",
    # Tiling
    "BaseSolver",
    "CheckerboardGraph",
    "ColoringWarning",
    "TilingSolver",
    "color_floor",
    "decide_tiling",
    "find_tiling",
    # Errors
    "GraphContractError",
    "MissingTerminalError",
    "TerminalNotInVertexSetError",
    "DegenerateTerminalsError",
    "UnknownVertexError",
    "MissingCapacityError",
    "ValidationError",
    "InvalidMarkerError",
    "InvalidCellError",
]
