#!/usr/bin/env python3
"""
Decide whether a floor plan can be tiled by dominoes.

Reads a floor plan ("#" blocked, newline between rows, anything else open)
from FILE or stdin and prints "true" or "false".

Usage:
    uv run python scripts/tile_floor.py [FILE] [--coloring] [--dominoes] [--dot OUT]

Examples:
    printf '  \\n  ' | uv run python scripts/tile_floor.py
    uv run python scripts/tile_floor.py floor.txt --coloring --dominoes
    uv run python scripts/tile_floor.py floor.txt --dot board.dot
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from domino_tiling import TilingSolver
from domino_tiling.export import to_dot_checkerboard


def load_floor(path: str | None) -> str:
    """Read floor text from a file, or stdin when path is None or "-"."""
    if path is None or path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text()
    # A single trailing newline ends the last row
    return text[:-1] if text.endswith("\n") else text


def main() -> int:
    parser = argparse.ArgumentParser(description="Decide domino tilings of floor plans")
    parser.add_argument("file", nargs="?", help="Floor-plan file (default: stdin)")
    parser.add_argument("--blocked", default="#", help="Marker for blocked cells")
    parser.add_argument("--coloring", action="store_true", help="Print the checkerboard coloring")
    parser.add_argument("--dominoes", action="store_true", help="Print the dominoes of a tiling")
    parser.add_argument("--dot", metavar="OUT", help="Write the board as Graphviz DOT")
    args = parser.parse_args()

    solver = TilingSolver(floor=load_floor(args.file), blocked=args.blocked).run()

    if args.coloring:
        print(solver.labeled_floor)
    if args.dominoes and solver.dominoes:
        for domino in solver.dominoes:
            print(f"{domino.black} - {domino.red}")
    if args.dot and solver.board is not None:
        Path(args.dot).write_text(
            to_dot_checkerboard(solver.board, flow=solver.board.max_matching())
        )

    print("true" if solver.is_tileable else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())
