"""Connectivity helpers shared by the generation algorithms.

Two different graphs are involved:

* the *lattice* graph, where every pair of adjacent unmasked cells is an
  edge whether carved or not;
* the *linked* graph, where only carved passages count.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, List, Set

import structlog

from maze.errors import DisconnectedMaskError, EmptyGridError
from maze.point import Point

if TYPE_CHECKING:
    from maze.grid import Grid
    from maze_rng import MazeRNG

log = structlog.get_logger(__name__)


def lattice_regions(grid: "Grid") -> List[Set[Point]]:
    """Flood-fill the unmasked cells into lattice-connected regions."""
    seen: Set[Point] = set()
    regions: List[Set[Point]] = []
    for cell in grid.iter_cells():
        if cell.point in seen:
            continue
        region = {cell.point}
        queue = deque([cell.point])
        while queue:
            current = queue.popleft()
            for neighbor in grid.neighbors(current):
                if neighbor not in region:
                    region.add(neighbor)
                    queue.append(neighbor)
        seen |= region
        regions.append(region)
    return regions


def ensure_single_region(grid: "Grid") -> None:
    """Raise unless the unmasked cells form exactly one lattice region."""
    regions = lattice_regions(grid)
    if not regions:
        log.error("Grid has no unmasked cells", width=grid.width, height=grid.height)
        raise EmptyGridError("Grid has no unmasked cells")
    if len(regions) > 1:
        log.error(
            "Mask splits the grid into separate regions",
            regions=len(regions),
            sizes=sorted((len(r) for r in regions), reverse=True),
        )
        raise DisconnectedMaskError(
            f"Mask leaves {len(regions)} disconnected regions; a maze needs one"
        )


class _UnionFind:
    def __init__(self, points):
        self.parent: Dict[Point, Point] = {p: p for p in points}

    def find(self, p: Point) -> Point:
        while self.parent[p] != p:
            self.parent[p] = self.parent[self.parent[p]]
            p = self.parent[p]
        return self.parent[p]

    def union(self, a: Point, b: Point) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True


def linked_component_count(grid: "Grid") -> int:
    sets = _UnionFind(cell.point for cell in grid.iter_cells())
    for cell in grid.iter_cells():
        for linked in cell.links():
            sets.union(cell.point, linked)
    return len({sets.find(cell.point) for cell in grid.iter_cells()})


def bridge_components(grid: "Grid", rng: "MazeRNG") -> int:
    """Link adjacent cells across linked components until one remains.

    Each bridge joins two distinct components, so a forest stays a forest.
    A grid that is already one component consumes no random draws.
    Returns the number of bridges carved.
    """
    sets = _UnionFind(cell.point for cell in grid.iter_cells())
    components = len(sets.parent)
    for cell in grid.iter_cells():
        for linked in cell.links():
            if sets.union(cell.point, linked):
                components -= 1
    if components <= 1:
        return 0

    candidates = [
        (cell.point, neighbor)
        for cell in grid.iter_cells()
        for neighbor in (cell.point.east(), cell.point.south())
        if grid.get(neighbor) is not None
        and sets.find(cell.point) != sets.find(neighbor)
    ]
    # Kruskal over a random edge order
    rng.shuffle(candidates)
    bridges = 0
    for a, b in candidates:
        if components == 1:
            break
        if sets.union(a, b):
            grid.link(a, b)
            components -= 1
            bridges += 1

    if bridges:
        log.debug("Bridged linked components", bridges=bridges)
    return bridges


__all__ = [
    "lattice_regions",
    "ensure_single_region",
    "linked_component_count",
    "bridge_components",
]
