# engine/text_renderer.py
"""Console rendering of rectangular grids as ``+---+`` box drawings."""
from __future__ import annotations

from typing import Optional

import numpy as np

from maze.cell import Cell
from maze.distances import Distances
from maze.grid import Grid
from maze.point import Direction

CORNER = "+"
HORIZONTAL_WALL = "---"
VERTICAL_WALL = "|"
OPEN_HORIZONTAL = "   "
OPEN_VERTICAL = " "


def contents_of(cell: Optional[Cell], distances: Optional[Distances]) -> str:
    """Base-36 distance label, or a blank when there is nothing to show."""
    if cell is None or distances is None:
        return " "
    distance = distances.distance(cell.point)
    if distance is None:
        return " "
    return np.base_repr(distance, base=36).lower()


def render_text(grid: Grid, distances: Optional[Distances] = None) -> str:
    output = [CORNER + (HORIZONTAL_WALL + CORNER) * grid.width]

    for row in grid.iter_rows():
        top = [VERTICAL_WALL]
        bottom = [CORNER]
        for cell in row:
            top.append(f" {contents_of(cell, distances)} ")
            east_open = cell is not None and cell.is_linked_towards(Direction.EAST)
            top.append(OPEN_VERTICAL if east_open else VERTICAL_WALL)

            south_open = cell is not None and cell.is_linked_towards(Direction.SOUTH)
            bottom.append(OPEN_HORIZONTAL if south_open else HORIZONTAL_WALL)
            bottom.append(CORNER)
        output.append("".join(top))
        output.append("".join(bottom))

    return "\n".join(output) + "\n"


__all__ = ["render_text", "contents_of"]
