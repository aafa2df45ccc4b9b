"""
Domino tiling decision.

A floor plan has a perfect domino tiling iff the black/red adjacency graph
of its checkerboard coloring has a perfect matching. The solver colors the
floor, builds the CheckerboardGraph, rejects unequal color counts without
running flow, and otherwise compares the max flow to the number of black
cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from ..base import BaseSolver
from ..types import Domino, Event, EventType
from ..validation import validate_markers
from .checkerboard import CheckerboardGraph
from .floor import BLACK, BLOCKED, RED, checkerboard_colors, color_floor, parse_floor

if TYPE_CHECKING:
    from typing_extensions import Self


class TilingSolver(BaseSolver):
    """
    Decide whether a floor plan can be tiled by 1x2 dominoes.

    Example:
        solver = TilingSolver(floor="  #\\n  #").run()
        solver.is_tileable      # True
        solver.dominoes         # [Domino(black=(0, 0), red=(0, 1)), ...]

    Attributes:
        is_tileable: Decision after run()
        matching_size: Size of the maximum black/red matching
        black_count: Number of black cells
        red_count: Number of red cells
        dominoes: Dominoes of one perfect tiling, or None
        labeled_floor: Floor text with open cells labeled b/r
        board: CheckerboardGraph of the last run
    """

    def __init__(
        self,
        *,
        floor: str = "",
        blocked: str = BLOCKED,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize the solver.

        Args:
            floor: Floor-plan text
            blocked: Marker for blocked cells
            on_start: Callback for start event (graph built)
            on_tick: Callback for tick event (one per augmenting path)
            on_end: Callback for end event (decision reached)
        """
        super().__init__(on_start=on_start, on_tick=on_tick, on_end=on_end)

        # Output data
        self._board: Optional[CheckerboardGraph] = None
        self._is_tileable: Optional[bool] = None
        self._matching_size = 0
        self._dominoes: Optional[list[Domino]] = None

        self._floor = str(floor)
        self._blocked = BLOCKED
        self.blocked = blocked

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def floor(self) -> str:
        """Get the floor-plan text."""
        return self._floor

    @floor.setter
    def floor(self, value: str) -> None:
        """Set the floor-plan text."""
        self._floor = str(value)
        self._is_tileable = None

    @property
    def blocked(self) -> str:
        """Get the blocked-cell marker."""
        return self._blocked

    @blocked.setter
    def blocked(self, value: str) -> None:
        """
        Set the blocked-cell marker.

        Raises:
            InvalidMarkerError: If value is not a single character, is a
                newline, or collides with the black/red labels
        """
        self._blocked, _, _ = validate_markers(value, BLACK, RED)
        self._is_tileable = None

    @property
    def labeled_floor(self) -> str:
        """Floor text with every open cell labeled black or red."""
        return color_floor(self._floor, blocked=self._blocked)

    @property
    def board(self) -> Optional[CheckerboardGraph]:
        """CheckerboardGraph built by the last run()."""
        return self._board

    @property
    def is_tileable(self) -> bool:
        """Whether the floor can be tiled (runs the solver if needed)."""
        if self._is_tileable is None:
            self.run()
        assert self._is_tileable is not None
        return self._is_tileable

    @property
    def matching_size(self) -> int:
        """Size of the maximum black/red matching found by the last run()."""
        return self._matching_size

    @property
    def black_count(self) -> int:
        return self._board.num_black if self._board is not None else 0

    @property
    def red_count(self) -> int:
        return self._board.num_red if self._board is not None else 0

    @property
    def dominoes(self) -> Optional[list[Domino]]:
        """Dominoes of a perfect tiling, or None if there is none."""
        if self._is_tileable is None:
            self.run()
        return self._dominoes

    # -------------------------------------------------------------------------
    # Solve
    # -------------------------------------------------------------------------

    def run(self) -> Self:
        """
        Build the graph and decide the tiling.

        Returns:
            self (for chaining)
        """
        colors = checkerboard_colors(parse_floor(self._floor, self._blocked))
        board = CheckerboardGraph(colors)
        self._board = board
        self._matching_size = 0
        self._dominoes = None

        self.trigger(
            {
                "type": EventType.start,
                "black_count": board.num_black,
                "red_count": board.num_red,
            }
        )

        if not board.is_valid():
            self._is_tileable = False
        else:
            flow = 0

            def on_augment(path: list[int], amount: int) -> None:
                nonlocal flow
                flow += amount
                self.trigger({"type": EventType.tick, "flow": flow, "path": path})

            result = board.max_matching(on_augment=on_augment)
            self._matching_size = result.value
            self._is_tileable = result.value == board.num_black
            if self._is_tileable:
                self._dominoes = board.matched_pairs(result)

        self.trigger(
            {
                "type": EventType.end,
                "flow": self._matching_size,
                "tileable": self._is_tileable,
            }
        )
        return self


def decide_tiling(floor: str, *, blocked: str = BLOCKED) -> bool:
    """
    Decide whether a floor plan has a perfect domino tiling.

    Args:
        floor: Row-major text; blocked marker for blocked cells, newline
            between rows, any other character for an open cell
        blocked: Marker for blocked cells

    Returns:
        True iff every open cell can be covered by non-overlapping 1x2
        dominoes that avoid blocked cells and stay inside the grid

    Example:
        >>> decide_tiling("  ")
        True
        >>> decide_tiling("  \\n #")
        False
    """
    return TilingSolver(floor=floor, blocked=blocked).run().is_tileable


def find_tiling(floor: str, *, blocked: str = BLOCKED) -> Optional[list[Domino]]:
    """
    Find one perfect domino tiling of a floor plan.

    Returns:
        List of dominoes covering every open cell exactly once, or None
    """
    return TilingSolver(floor=floor, blocked=blocked).run().dominoes


__all__ = ["TilingSolver", "decide_tiling", "find_tiling"]
