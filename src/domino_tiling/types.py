"""
Common types for domino tiling.

This module provides the small value types shared across the package:
- EventType: Solver lifecycle events
- Event: Event payload for callbacks
- CellColor: Label of a grid cell after checkerboard coloring
- Coordinate: (row, column) position of a cell
- Domino: One placed 1x2 domino
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, TypedDict

# (row, column) of a cell in the floor plan
Coordinate = tuple[int, int]


class EventType(IntEnum):
    """
    Solver lifecycle events.

    - start: Graph has been built, flow computation is about to begin
    - tick: Fired once per augmenting path
    - end: Decision has been reached
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    black_count: int
    red_count: int
    flow: int
    path: list[int]
    tileable: bool
    listener: Optional[Callable[[], None]]


class CellColor(IntEnum):
    """Label of a cell in a colored floor plan."""

    blocked = 0
    black = 1
    red = 2


@dataclass(frozen=True)
class Domino:
    """
    A domino covering one black and one red cell.

    Attributes:
        black: Coordinate of the black half
        red: Coordinate of the red half
    """

    black: Coordinate
    red: Coordinate

    @property
    def cells(self) -> tuple[Coordinate, Coordinate]:
        """Both covered cells, black first."""
        return (self.black, self.red)

    @property
    def is_horizontal(self) -> bool:
        return self.black[0] == self.red[0]

    def is_adjacent(self) -> bool:
        """Whether the two halves share an edge in the grid."""
        dr = abs(self.black[0] - self.red[0])
        dc = abs(self.black[1] - self.red[1])
        return dr + dc == 1


__all__ = [
    "Coordinate",
    "EventType",
    "Event",
    "CellColor",
    "Domino",
]
