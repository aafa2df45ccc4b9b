"""
Domino tiling of floor plans.

A floor plan is tileable by 1x2 dominoes iff the checkerboard black/red
adjacency graph of its open cells has a perfect matching.

- floor: parsing and checkerboard coloring
- checkerboard: bipartite flow network of a colored floor
- solver: the tiling decision
"""

from .checkerboard import CheckerboardGraph, ColoringWarning
from .floor import (
    checkerboard_colors,
    color_floor,
    count_open_cells,
    parse_floor,
    parse_labeled_floor,
)
from .solver import TilingSolver, decide_tiling, find_tiling

__all__ = [
    "CheckerboardGraph",
    "ColoringWarning",
    "checkerboard_colors",
    "color_floor",
    "count_open_cells",
    "parse_floor",
    "parse_labeled_floor",
    "TilingSolver",
    "decide_tiling",
    "find_tiling",
]
