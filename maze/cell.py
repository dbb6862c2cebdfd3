# maze/cell.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import structlog

from maze.errors import InvalidLinkError
from maze.point import Direction, Point

log = structlog.get_logger(__name__)


@dataclass
class NeighborPoint:
    """A potential edge from a cell to the coordinate next to it."""

    point: Point
    linked: bool = False


class Cell:
    """A lattice node with one neighbour slot per cardinal direction.

    A slot only records the *potential* edge to the adjacent coordinate. The
    ``linked`` flag marks a carved passage; keeping both endpoints in sync is
    the grid's job, not the cell's.
    """

    __slots__ = ("point", "north", "east", "south", "west")

    def __init__(self, point: Point):
        self.point = Point(*point)
        self.north = NeighborPoint(self.point.north())
        self.east = NeighborPoint(self.point.east())
        self.south = NeighborPoint(self.point.south())
        self.west = NeighborPoint(self.point.west())

    def __repr__(self) -> str:
        return f"Cell({self.point.x}, {self.point.y}, links={self.links()})"

    def slot(self, direction: Direction) -> NeighborPoint:
        return getattr(self, direction.name.lower())

    def _slots(self) -> Tuple[NeighborPoint, ...]:
        """Slots in north, south, east, west order."""
        return (self.north, self.south, self.east, self.west)

    def link(self, other_position: Point) -> None:
        """Mark the slot facing ``other_position`` as a passage."""
        direction = self.point.direction_to(Point(*other_position))
        if direction is None:
            log.error(
                "Link requested between non-adjacent points",
                cell=self.point,
                other=other_position,
            )
            raise InvalidLinkError(
                f"{tuple(other_position)} is not adjacent to {tuple(self.point)}"
            )
        self.slot(direction).linked = True

    def links(self) -> List[Point]:
        return [slot.point for slot in self._slots() if slot.linked]

    def is_linked(self, other: Optional["Cell"]) -> bool:
        if other is None:
            return False
        return other.point in self.links()

    def is_linked_towards(self, direction: Direction) -> bool:
        return self.slot(direction).linked

    @property
    def visited(self) -> bool:
        """True once any passage has been carved into this cell."""
        return any(slot.linked for slot in self._slots())


__all__ = ["Cell", "NeighborPoint"]
