# maze/polar.py
from __future__ import annotations

from typing import Optional, Tuple

from maze.cell import Cell
from maze.grid import Grid
from maze.point import Point


class PolarGrid(Grid):
    """Circular lattice: row ``y`` is ring ``y`` counted from the centre.

    Generation sees the same plain lattice as :class:`RectangularGrid`; the
    ring-aware helpers below are only consulted when drawing.
    """

    def cells_in_ring(self, ring: int) -> int:
        """Number of unmasked cells on a ring, i.e. its angular sector count."""
        if not 0 <= ring < self.height:
            return 0
        row = self.cells[ring * self.width:(ring + 1) * self.width]
        return sum(1 for cell in row if cell is not None)

    def angular_neighbors(self, point: Point) -> Tuple[Optional[Cell], Optional[Cell]]:
        """Counter-clockwise and clockwise cells, wrapping around the ring."""
        x, y = point
        ccw = self.get(Point((x - 1) % self.width, y))
        cw = self.get(Point((x + 1) % self.width, y))
        return ccw, cw

    def inward(self, point: Point) -> Optional[Cell]:
        return self.get(Point(*point).north())

    def outward(self, point: Point) -> Optional[Cell]:
        return self.get(Point(*point).south())


__all__ = ["PolarGrid"]
