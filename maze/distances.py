# maze/distances.py
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, ItemsView, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np
import structlog

from maze.point import Point

if TYPE_CHECKING:
    from maze.grid import Grid

log = structlog.get_logger(__name__)


class Distances:
    """BFS distances from ``root`` over carved passages.

    Points that were never reached are simply absent; ``distance`` returns
    ``None`` for them rather than zero.
    """

    def __init__(self, root: Point):
        self.root = Point(*root)
        self.cells: Dict[Point, int] = {}

    def __repr__(self) -> str:
        return f"Distances(root={tuple(self.root)}, reached={len(self.cells)})"

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, point: object) -> bool:
        return point in self.cells

    def __iter__(self) -> Iterator[Point]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distances):
            return NotImplemented
        return self.root == other.root and self.cells == other.cells

    def items(self) -> ItemsView[Point, int]:
        return self.cells.items()

    def distance(self, point: Point) -> Optional[int]:
        return self.cells.get(Point(*point))

    def compute(self, grid: "Grid") -> "Distances":
        """Level-order BFS from the root across linked neighbours only."""
        self.cells = {}
        if grid.get(self.root) is None:
            log.warning("Distance root is not a grid cell", root=self.root)
            return self

        self.cells[self.root] = 0
        frontier = [self.root]
        depth = 0
        while frontier:
            depth += 1
            new_frontier = []
            for point in frontier:
                cell = grid.get(point)
                if cell is None:
                    continue
                for linked in cell.links():
                    if linked in self.cells:
                        continue
                    self.cells[linked] = depth
                    new_frontier.append(linked)
            frontier = new_frontier

        log.debug("Distances computed", root=self.root, reached=len(self.cells))
        return self

    def shortest_path_to(self, grid: "Grid", goal: Point) -> "Distances":
        """Walk back from ``goal`` to the root along strictly decreasing distances.

        The returned breadcrumbs hold only the points on the path. At each step
        the first qualifying link in north, south, east, west order wins.
        """
        goal = Point(*goal)
        breadcrumbs = Distances(self.root)
        goal_distance = self.distance(goal)
        if goal_distance is None:
            log.warning("Goal not reachable from root", root=self.root, goal=goal)
            return breadcrumbs

        current = goal
        breadcrumbs.cells[current] = goal_distance
        while current != self.root:
            cell = grid.get(current)
            current_distance = self.cells[current]
            step = None
            for neighbor in cell.links():  # type: ignore[union-attr]
                neighbor_distance = self.distance(neighbor)
                if neighbor_distance is not None and neighbor_distance < current_distance:
                    step = neighbor
                    break
            if step is None:
                # Only possible if links changed after compute()
                raise RuntimeError(f"No shorter link from {tuple(current)}; distances are stale")
            breadcrumbs.cells[step] = self.cells[step]
            current = step
        return breadcrumbs

    def path_points(self) -> List[Point]:
        """Recorded points ordered from the root outwards."""
        return sorted(self.cells, key=self.cells.__getitem__)

    def max(self, grid: "Grid") -> Tuple[int, Point]:
        """Farthest reached cell; ties go to the first in grid scan order."""
        max_distance = 0
        max_point = self.root
        for cell in grid.iter_cells():
            distance = self.cells.get(cell.point)
            if distance is None:
                continue
            if distance > max_distance:
                max_distance = distance
                max_point = cell.point
        return max_distance, max_point


class DistanceStats(NamedTuple):
    reached: int
    unreached: int
    max_distance: int
    mean_distance: float


def distance_stats(grid: "Grid", distances: Distances) -> DistanceStats:
    values = np.fromiter(
        (distances.cells[c.point] for c in grid.iter_cells() if c.point in distances.cells),
        dtype=np.int64,
    )
    reached = int(values.size)
    return DistanceStats(
        reached=reached,
        unreached=grid.size() - reached,
        max_distance=int(values.max()) if reached else 0,
        mean_distance=float(values.mean()) if reached else 0.0,
    )


def longest_path(grid: "Grid") -> Distances:
    """Breadcrumbs along the maze's diameter (two BFS passes)."""
    first = grid.first_cell()
    if first is None:
        return Distances(Point.zero())
    _, far_point = Distances(first.point).compute(grid).max(grid)
    from_far = Distances(far_point).compute(grid)
    _, goal = from_far.max(grid)
    return from_far.shortest_path_to(grid, goal)


__all__ = ["Distances", "DistanceStats", "distance_stats", "longest_path"]
