# maze/point.py
from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple


class Direction(Enum):
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()

    @property
    def offset(self) -> "Point":
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


class Point(NamedTuple):
    """An integer lattice coordinate. ``y`` grows southwards."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> "Point":
        return cls(0, 0)

    def north(self) -> "Point":
        return Point(self.x, self.y - 1)

    def south(self) -> "Point":
        return Point(self.x, self.y + 1)

    def east(self) -> "Point":
        return Point(self.x + 1, self.y)

    def west(self) -> "Point":
        return Point(self.x - 1, self.y)

    def step(self, direction: Direction) -> "Point":
        return self + direction.offset

    def direction_to(self, other: "Point") -> Direction | None:
        """Direction of *other* if it is exactly one cardinal step away."""
        return _DIRECTIONS_BY_OFFSET.get(other - self)

    def is_adjacent(self, other: "Point") -> bool:
        return self.direction_to(other) is not None

    # NamedTuple would otherwise concatenate
    def __add__(self, other: "Point") -> "Point":  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other[0], self.y - other[1])


_OFFSETS = {
    Direction.NORTH: Point(0, -1),
    Direction.EAST: Point(1, 0),
    Direction.SOUTH: Point(0, 1),
    Direction.WEST: Point(-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_DIRECTIONS_BY_OFFSET = {offset: direction for direction, offset in _OFFSETS.items()}

# Order in which neighbours and links are reported everywhere in the core.
SCAN_ORDER = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)

__all__ = ["Direction", "Point", "SCAN_ORDER"]
