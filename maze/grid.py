# maze/grid.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional

import structlog

from maze.cell import Cell
from maze.distances import Distances
from maze.errors import EmptyGridError, InvalidLinkError
from maze.mask import Mask
from maze.point import SCAN_ORDER, Point

if TYPE_CHECKING:
    from maze_rng import MazeRNG

log = structlog.get_logger(__name__)


class Grid:
    """Shared contract for every lattice topology.

    Cells live in a flat list indexed by ``y * width + x``; a masked position
    holds ``None`` rather than being removed so index arithmetic stays O(1).
    Algorithms are written against this class only.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            log.error("Invalid grid dimensions", width=width, height=height)
            raise ValueError("Grid width and height must be positive integers.")
        self.width = width
        self.height = height
        self.cells: List[Optional[Cell]] = [
            Cell(Point(x, y)) for y in range(height) for x in range(width)
        ]
        self.distances = Distances(Point.zero())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.width}x{self.height}, "
            f"cells={self.size()}, links={self.link_count()})"
        )

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_mask(cls, mask: Mask) -> "Grid":
        grid = cls(mask.width, mask.height)
        grid.apply_mask(mask)
        first = grid.first_cell()
        if first is not None:
            grid.distances = Distances(first.point)
        log.info(
            "Grid built from mask",
            topology=cls.__name__,
            width=grid.width,
            height=grid.height,
            cells=grid.size(),
        )
        return grid

    def apply_mask(self, mask: Mask) -> None:
        if (mask.width, mask.height) != (self.width, self.height):
            raise ValueError(
                f"Mask is {mask.width}x{mask.height}, grid is {self.width}x{self.height}"
            )
        for i, active in enumerate(mask.bits.ravel(order="C")):
            if not active:
                self.cells[i] = None

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------
    def point_to_index(self, point: Point) -> Optional[int]:
        x, y = point
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return y * self.width + x

    def get(self, point: Point) -> Optional[Cell]:
        index = self.point_to_index(point)
        if index is None:
            return None
        return self.cells[index]

    def __getitem__(self, point: Point) -> Optional[Cell]:
        return self.get(point)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, tuple) and self.get(point) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def size(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def first_cell(self) -> Optional[Cell]:
        return next(self.iter_cells(), None)

    def iter_cells(self) -> Iterator[Cell]:
        for cell in self.cells:
            if cell is not None:
                yield cell

    def iter_rows(self) -> Iterator[List[Optional[Cell]]]:
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def neighbors(self, point: Point) -> List[Point]:
        """Existing lattice neighbours in north, south, east, west order."""
        origin = Point(*point)
        found = []
        for direction in SCAN_ORDER:
            cell = self.get(origin.step(direction))
            if cell is not None:
                found.append(cell.point)
        return found

    def random_cell(self, rng: "MazeRNG") -> Cell:
        present = [cell for cell in self.cells if cell is not None]
        if not present:
            log.error("Random cell requested from an empty grid", width=self.width, height=self.height)
            raise EmptyGridError("Grid has no unmasked cells")
        return rng.choice(present)

    # ------------------------------------------------------------------
    # linking
    # ------------------------------------------------------------------
    def link(self, a: Point, b: Point, bidirectional: bool = True) -> None:
        """Carve a passage between two lattice-adjacent cells.

        Both endpoints are validated before either cell is touched.
        """
        a, b = Point(*a), Point(*b)
        cell_a = self.get(a)
        cell_b = self.get(b)
        if not a.is_adjacent(b):
            log.error("Refusing to link non-adjacent points", a=a, b=b)
            raise InvalidLinkError(f"{tuple(a)} and {tuple(b)} are not adjacent")
        if cell_a is None or (bidirectional and cell_b is None):
            log.error("Refusing to link to an absent cell", a=a, b=b)
            raise InvalidLinkError(f"Cannot link {tuple(a)} to {tuple(b)}: cell absent")

        cell_a.link(b)
        if bidirectional:
            cell_b.link(a)  # type: ignore[union-attr]

    def link_count(self) -> int:
        """Number of undirected passages."""
        directed = sum(len(cell.links()) for cell in self.iter_cells())
        return directed // 2

    # ------------------------------------------------------------------
    # distances
    # ------------------------------------------------------------------
    def compute_distances(self, root: Optional[Point] = None) -> Distances:
        """Re-root the grid's distances and run BFS over the current links."""
        if root is None:
            root = self.distances.root
        self.distances = Distances(Point(*root)).compute(self)
        return self.distances


class RectangularGrid(Grid):
    """Cartesian lattice: cardinal offsets are the neighbours."""


__all__ = ["Grid", "RectangularGrid"]
