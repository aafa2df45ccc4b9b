"""
Floor-plan parsing and checkerboard coloring.

A floor plan is row-major text: the blocked marker (default "#") is a cell
that must stay uncovered, "\\n" ends a row, and every other character is an
open cell. Rows may have different lengths; the short ones are padded with
blocked cells when converted to arrays.

The colorer anchors the checkerboard on the first open cell in row-major
order, which is always black. A cell is black iff (row + column) has the same
parity as the anchor cell, so grid-adjacent open cells always differ.
"""

from __future__ import annotations

import numpy as np

from ..types import CellColor
from ..validation import InvalidCellError, validate_markers

BLOCKED = "#"
BLACK = "b"
RED = "r"


def split_rows(floor: str) -> list[str]:
    """Split floor text into rows on newlines only."""
    return floor.split("\n")


def parse_floor(floor: str, blocked: str = BLOCKED) -> np.ndarray:
    """
    Parse floor text into an open-cell mask.

    Args:
        floor: Floor-plan text
        blocked: Marker for blocked cells

    Returns:
        Boolean array of shape (rows, width), True where the cell is open
    """
    rows = split_rows(floor)
    width = max(len(row) for row in rows)
    mask = np.zeros((len(rows), width), dtype=bool)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != blocked:
                mask[r, c] = True
    return mask


def checkerboard_colors(mask: np.ndarray) -> np.ndarray:
    """
    Color the open cells of a mask as a checkerboard.

    Args:
        mask: Boolean open-cell array

    Returns:
        int8 array of CellColor values with the same shape as mask
    """
    colors = np.full(mask.shape, int(CellColor.blocked), dtype=np.int8)
    open_cells = np.argwhere(mask)
    if len(open_cells) == 0:
        return colors

    anchor_row, anchor_col = open_cells[0]
    rows, cols = np.indices(mask.shape)
    is_black = (rows + cols) % 2 == (anchor_row + anchor_col) % 2

    colors[mask & is_black] = int(CellColor.black)
    colors[mask & ~is_black] = int(CellColor.red)
    return colors


def color_floor(
    floor: str,
    *,
    blocked: str = BLOCKED,
    black: str = BLACK,
    red: str = RED,
) -> str:
    """
    Label every open cell of a floor plan black or red.

    Blocked cells and newlines are copied unchanged, so the result has the
    same length and row structure as the input.

    Args:
        floor: Floor-plan text
        blocked: Marker for blocked cells
        black: Marker written for black cells
        red: Marker written for red cells

    Returns:
        Labeled grid text

    Raises:
        InvalidMarkerError: If the markers are malformed or collide

    Example:
        >>> color_floor("  \\n  ")
        'br\\nrb'
    """
    validate_markers(blocked, black, red)
    colors = checkerboard_colors(parse_floor(floor, blocked))
    labels = {int(CellColor.black): black, int(CellColor.red): red}

    out = []
    for r, row in enumerate(split_rows(floor)):
        out.append(
            "".join(ch if ch == blocked else labels[int(colors[r, c])] for c, ch in enumerate(row))
        )
    return "\n".join(out)


def parse_labeled_floor(
    labeled: str,
    *,
    blocked: str = BLOCKED,
    black: str = BLACK,
    red: str = RED,
) -> np.ndarray:
    """
    Parse labeled grid text back into a CellColor array.

    Args:
        labeled: Text using only the blocked, black, red and newline markers
        blocked: Marker for blocked cells
        black: Marker for black cells
        red: Marker for red cells

    Returns:
        int8 array of CellColor values

    Raises:
        InvalidMarkerError: If the markers are malformed or collide
        InvalidCellError: If the text contains any other character
    """
    validate_markers(blocked, black, red)
    lookup = {
        blocked: int(CellColor.blocked),
        black: int(CellColor.black),
        red: int(CellColor.red),
    }
    rows = split_rows(labeled)
    width = max(len(row) for row in rows)
    colors = np.full((len(rows), width), int(CellColor.blocked), dtype=np.int8)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch not in lookup:
                raise InvalidCellError(f"unknown cell {ch!r} at row {r}, column {c}")
            colors[r, c] = lookup[ch]
    return colors


def count_open_cells(floor: str, blocked: str = BLOCKED) -> int:
    """Number of open cells in a floor plan."""
    return int(parse_floor(floor, blocked).sum())


__all__ = [
    "BLOCKED",
    "BLACK",
    "RED",
    "split_rows",
    "parse_floor",
    "checkerboard_colors",
    "color_floor",
    "parse_labeled_floor",
    "count_open_cells",
]
