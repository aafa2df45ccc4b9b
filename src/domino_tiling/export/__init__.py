"""
Export functionality for flow networks.

- DOT: Graphviz format for graph visualization tools

Example usage:
    from domino_tiling.tiling import CheckerboardGraph, color_floor
    from domino_tiling.export import to_dot_checkerboard

    board = CheckerboardGraph.from_text(color_floor("  \\n  "))
    dot_content = to_dot_checkerboard(board, flow=board.max_matching())
    with open("board.dot", "w") as f:
        f.write(dot_content)
"""

from .dot import to_dot, to_dot_checkerboard

__all__ = [
    "to_dot",
    "to_dot_checkerboard",
]
