"""
Maximum flow on FlowGraph networks.

- shortest_augmenting_path: BFS for the fewest-edges augmenting path
- max_flow / solve_max_flow: Edmonds-Karp on a private residual copy
"""

from .augmenting_path import shortest_augmenting_path
from .edmonds_karp import FlowResult, build_residual_graph, max_flow, solve_max_flow

__all__ = [
    "shortest_augmenting_path",
    "FlowResult",
    "build_residual_graph",
    "max_flow",
    "solve_max_flow",
]
