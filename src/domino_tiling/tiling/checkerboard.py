"""
Bipartite flow network for a checkerboard-colored floor plan.

Black cells form one side and red cells the other. Each black cell gets a
unit edge to every grid-adjacent red cell. A synthetic source feeds every
black cell and every red cell drains into a synthetic sink, both with
capacity 1, so the maximum flow equals the maximum black/red matching.
"""

from __future__ import annotations

import warnings
from typing import Callable, Optional

import numpy as np

from ..flow import FlowResult, solve_max_flow
from ..graph import FlowGraph
from ..types import CellColor, Coordinate, Domino
from .floor import BLACK, BLOCKED, RED, parse_labeled_floor

# up, down, left, right
_DIRECTIONS: tuple[Coordinate, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class ColoringWarning(UserWarning):
    """Warning about grid-adjacent cells that share a color."""

    pass


class CheckerboardGraph:
    """
    Flow network of a colored floor plan.

    All vertices (cells, source and sink) live in one FlowGraph owned by
    this object, and nothing is shared between instances.

    Example:
        board = CheckerboardGraph.from_text("br\\nrb")
        board.is_valid()               # True
        board.max_matching().value     # 2

    Attributes:
        graph: Underlying FlowGraph
        source: Source vertex, wired to every black cell
        sink: Sink vertex, fed by every red cell
        black: Black cell vertices keyed by (row, column)
        red: Red cell vertices keyed by (row, column)
        coordinates: (row, column) of every cell vertex
    """

    def __init__(self, colors: np.ndarray) -> None:
        """
        Build the network from a CellColor array.

        Args:
            colors: 2D array of CellColor values
        """
        self.graph = FlowGraph()
        self.black: dict[Coordinate, int] = {}
        self.red: dict[Coordinate, int] = {}
        self.coordinates: dict[int, Coordinate] = {}

        self._add_cells(colors)
        self._add_neighbors()

        self.source = self.graph.add_vertex()
        self.sink = self.graph.add_vertex()
        for v in self.black.values():
            self.graph.add_edge(self.source, v, 1)
        for v in self.red.values():
            self.graph.add_edge(v, self.sink, 1)

    @classmethod
    def from_text(
        cls,
        labeled: str,
        *,
        blocked: str = BLOCKED,
        black: str = BLACK,
        red: str = RED,
    ) -> CheckerboardGraph:
        """
        Build the network from labeled grid text.

        Raises:
            InvalidMarkerError: If the markers are malformed or collide
            InvalidCellError: If the text contains an unknown character
        """
        return cls(parse_labeled_floor(labeled, blocked=blocked, black=black, red=red))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def _add_cells(self, colors: np.ndarray) -> None:
        for r, c in np.argwhere(colors != int(CellColor.blocked)):
            coord = (int(r), int(c))
            v = self.graph.add_vertex()
            if colors[r, c] == int(CellColor.black):
                self.black[coord] = v
            else:
                self.red[coord] = v
            self.coordinates[v] = coord

    def _add_neighbors(self) -> None:
        for (r, c), v in self.black.items():
            for dr, dc in _DIRECTIONS:
                nbr = self._red_at((r + dr, c + dc))
                if nbr is not None:
                    self.graph.add_edge(v, nbr, 1)

        same_color = self._count_same_color_pairs()
        if same_color:
            warnings.warn(
                f"{same_color} pair(s) of adjacent same-colored cells will not be linked; "
                "the grid is not a proper checkerboard coloring.",
                ColoringWarning,
                stacklevel=2,
            )

    def _count_same_color_pairs(self) -> int:
        count = 0
        for cells in (self.black, self.red):
            for r, c in cells:
                count += ((r + 1, c) in cells) + ((r, c + 1) in cells)
        return count

    def _red_at(self, coord: Coordinate) -> Optional[int]:
        return self.red.get(coord)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def num_black(self) -> int:
        return len(self.black)

    @property
    def num_red(self) -> int:
        return len(self.red)

    def is_valid(self) -> bool:
        """Whether a perfect matching is possible at all (equal color counts)."""
        return self.num_black == self.num_red

    def vertices(self) -> set[int]:
        """Every vertex of the network, including source and sink."""
        return set(self.graph.vertices())

    def max_matching(
        self, on_augment: Optional[Callable[[list[int], int], None]] = None
    ) -> FlowResult:
        """
        Run max flow from source to sink.

        The flow value is the size of a maximum black/red matching.
        """
        return solve_max_flow(
            self.graph, self.source, self.sink, self.vertices(), on_augment=on_augment
        )

    def matched_pairs(self, result: FlowResult) -> list[Domino]:
        """
        Dominoes of the matching carried by a flow result.

        Args:
            result: Result of max_matching() on this board

        Returns:
            One Domino per black -> red edge carrying flow, in row-major
            order of the black cell
        """
        dominoes = []
        for coord, v in sorted(self.black.items()):
            for nbr in self.graph.neighbors(v):
                if result.flows.get((v, nbr), 0) > 0:
                    dominoes.append(Domino(black=coord, red=self.coordinates[nbr]))
        return dominoes

    def describe(self) -> str:
        """
        Diagnostic dump: coordinates and adjacency of every vertex.

        Returns:
            Multi-line text, one line per vertex
        """
        lines = [f"source -> {len(self.black)} black cell(s)"]
        for color, cells in (("black", self.black), ("red", self.red)):
            for coord, v in sorted(cells.items()):
                nbrs = []
                for nbr in sorted(self.graph.neighbors(v)):
                    name = "sink" if nbr == self.sink else str(self.coordinates[nbr])
                    nbrs.append(f"{name}:{self.graph.capacity(v, nbr)}")
                lines.append(f"{color} {coord} -> {', '.join(nbrs) if nbrs else '-'}")
        lines.append(f"{len(self.red)} red cell(s) -> sink")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CheckerboardGraph(black={self.num_black}, red={self.num_red})"


__all__ = ["CheckerboardGraph", "ColoringWarning"]
