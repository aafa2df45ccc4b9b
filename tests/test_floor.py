"""
Tests for floor-plan parsing and checkerboard coloring.
"""

import random

import numpy as np
import pytest

from domino_tiling import CellColor
from domino_tiling.tiling.floor import (
    checkerboard_colors,
    color_floor,
    count_open_cells,
    parse_floor,
    parse_labeled_floor,
)
from domino_tiling.validation import InvalidCellError, InvalidMarkerError


def _random_floor(rows: int, cols: int, seed: int) -> str:
    rng = random.Random(seed)
    return "\n".join(
        "".join("#" if rng.random() < 0.3 else " " for _ in range(cols)) for _ in range(rows)
    )


class TestParseFloor:
    """Open-cell mask parsing."""

    def test_open_and_blocked(self):
        mask = parse_floor(" #\n# ")
        assert mask.tolist() == [[True, False], [False, True]]

    def test_any_character_is_open(self):
        mask = parse_floor("a.#x")
        assert mask.tolist() == [[True, True, False, True]]

    def test_ragged_rows_padded_blocked(self):
        mask = parse_floor("   \n ")
        assert mask.shape == (2, 3)
        assert mask.tolist() == [[True, True, True], [True, False, False]]

    def test_trailing_newline_adds_empty_row(self):
        mask = parse_floor("  \n")
        assert mask.shape == (2, 2)
        assert not mask[1].any()

    def test_empty_floor(self):
        mask = parse_floor("")
        assert mask.size == 0

    def test_custom_blocked_marker(self):
        mask = parse_floor("X #", blocked="X")
        assert mask.tolist() == [[False, True, True]]

    def test_count_open_cells(self):
        assert count_open_cells("  #\n# #") == 3
        assert count_open_cells("") == 0


class TestCheckerboardColors:
    """Color assignment."""

    def test_first_open_cell_is_black(self):
        colors = checkerboard_colors(parse_floor("##\n# "))
        assert colors[1, 1] == CellColor.black

    def test_blocked_cells_stay_blocked(self):
        colors = checkerboard_colors(parse_floor("# "))
        assert colors[0, 0] == CellColor.blocked

    def test_all_blocked(self):
        colors = checkerboard_colors(parse_floor("##\n##"))
        assert (colors == CellColor.blocked).all()

    @pytest.mark.parametrize("seed", range(10))
    def test_adjacent_open_cells_differ(self, seed):
        """Proper 2-coloring on random floors."""
        colors = checkerboard_colors(parse_floor(_random_floor(6, 7, seed)))
        rows, cols = colors.shape
        for r in range(rows):
            for c in range(cols):
                if colors[r, c] == CellColor.blocked:
                    continue
                for nr, nc in ((r + 1, c), (r, c + 1)):
                    if nr < rows and nc < cols and colors[nr, nc] != CellColor.blocked:
                        assert colors[nr, nc] != colors[r, c]

    def test_dtype(self):
        colors = checkerboard_colors(parse_floor("  "))
        assert colors.dtype == np.int8


class TestColorFloor:
    """Labeled text output."""

    def test_two_by_two(self):
        assert color_floor("  \n  ") == "br\nrb"

    def test_anchor_on_odd_cell(self):
        """Anchoring on (0, 1) flips the parity of the whole board."""
        assert color_floor("# \n  ") == "#b\nbr"

    def test_anchor_on_later_row(self):
        assert color_floor("###\n#  ") == "###\n#br"

    def test_preserves_structure(self):
        floor = "# # \n  #\n"
        labeled = color_floor(floor)
        assert len(labeled) == len(floor)
        for a, b in zip(floor, labeled):
            if a in "#\n":
                assert a == b
            else:
                assert b in "br"

    def test_custom_markers(self):
        assert color_floor(". ", blocked=".", black="B", red="R") == ".B"

    def test_empty(self):
        assert color_floor("") == ""

    def test_colliding_markers_raise(self):
        with pytest.raises(InvalidMarkerError):
            color_floor("  ", blocked="b")


class TestParseLabeledFloor:
    """Labeled text back to colors."""

    def test_round_trip_shape(self):
        colors = parse_labeled_floor("br#\nrb")
        assert colors.tolist() == [[1, 2, 0], [2, 1, 0]]

    def test_unknown_character_raises(self):
        with pytest.raises(InvalidCellError, match="row 1, column 0"):
            parse_labeled_floor("br\n b")

    def test_matches_checkerboard_colors(self):
        floor = _random_floor(5, 5, 3)
        expected = checkerboard_colors(parse_floor(floor))
        assert (parse_labeled_floor(color_floor(floor)) == expected).all()
