# maze/algorithms.py
"""Maze generation algorithms.

Each generator carves a perfect maze (a spanning tree over the unmasked
cells) into an unlinked grid, touching it only through the :class:`Grid`
contract, so the same code serves rectangular and polar lattices.

Texture notes:

* Binary Tree and Sidewinder only ever look north and east. Binary Tree leaves
  unbroken corridors along the northern row and eastern column; Sidewinder
  keeps only the northern one.
* Aldous-Broder and Wilson's sample uniformly from all spanning trees.
* Hunt-and-Kill and the Recursive Backtracker produce long winding passages
  with relatively few dead ends.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Set

import structlog

from maze.connectivity import bridge_components, ensure_single_region
from maze.errors import IterationLimitError, UnknownAlgorithmError
from maze.point import Point

if TYPE_CHECKING:
    from maze.grid import Grid
    from maze_rng import MazeRNG

log = structlog.get_logger(__name__)


def _check_step_limit(steps: int, max_steps: Optional[int], algorithm: str) -> None:
    if max_steps is not None and steps > max_steps:
        log.error("Random walk exceeded step ceiling", algorithm=algorithm, max_steps=max_steps)
        raise IterationLimitError(f"{algorithm} exceeded {max_steps} walk steps")


def binary_tree(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    for cell in grid.iter_cells():
        candidates = [
            p for p in (cell.north.point, cell.east.point) if grid.get(p) is not None
        ]
        if candidates:
            grid.link(cell.point, rng.choice(candidates))
    # Irregular masks leave one component per cell without a north or east neighbour
    bridge_components(grid, rng)


def sidewinder(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    for row in grid.iter_rows():
        run: List[Point] = []
        for cell in row:
            if cell is None:
                continue
            run.append(cell.point)

            at_eastern_boundary = grid.get(cell.east.point) is None
            at_northern_boundary = grid.get(cell.north.point) is None
            should_close_out = at_eastern_boundary or (
                not at_northern_boundary and rng.get_bool()
            )

            if should_close_out:
                members = [p for p in run if grid.get(p.north()) is not None]
                if members:
                    member = rng.choice(members)
                    grid.link(member, member.north())
                run = []
            else:
                grid.link(cell.point, cell.east.point)
    bridge_components(grid, rng)


def aldous_broder(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    current = grid.random_cell(rng).point
    visited: Set[Point] = {current}
    unvisited = grid.size() - 1
    steps = 0

    while unvisited > 0:
        steps += 1
        _check_step_limit(steps, max_steps, "aldousbroder")
        neighbor = rng.choice(grid.neighbors(current))
        if neighbor not in visited:
            grid.link(current, neighbor)
            visited.add(neighbor)
            unvisited -= 1
        current = neighbor
    log.debug("Random walk finished", algorithm="aldousbroder", steps=steps)


def wilsons(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    unvisited = [cell.point for cell in grid.iter_cells()]
    unvisited.remove(rng.choice(unvisited))
    remaining = set(unvisited)
    steps = 0

    while unvisited:
        point = rng.choice(unvisited)
        path = [point]

        # Loop-erased walk until it touches the tree
        while point in remaining:
            steps += 1
            _check_step_limit(steps, max_steps, "wilsons")
            point = rng.choice(grid.neighbors(point))
            if point in path:
                del path[path.index(point) + 1:]
            else:
                path.append(point)

        for a, b in zip(path, path[1:]):
            grid.link(a, b)
            remaining.discard(a)
            unvisited.remove(a)
    log.debug("Random walk finished", algorithm="wilsons", steps=steps)


def hunt_and_kill(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    current: Optional[Point] = grid.random_cell(rng).point
    visited: Set[Point] = {current}

    while current is not None:
        unvisited_neighbors = [n for n in grid.neighbors(current) if n not in visited]
        if unvisited_neighbors:
            neighbor = rng.choice(unvisited_neighbors)
            grid.link(current, neighbor)
            visited.add(neighbor)
            current = neighbor
            continue

        current = None
        for cell in grid.iter_cells():
            if cell.point in visited:
                continue
            visited_neighbors = [n for n in grid.neighbors(cell.point) if n in visited]
            if visited_neighbors:
                grid.link(cell.point, rng.choice(visited_neighbors))
                visited.add(cell.point)
                current = cell.point
                break


def recursive_backtracker(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    start = grid.random_cell(rng).point
    stack = [start]
    visited: Set[Point] = {start}

    while stack:
        current = stack[-1]
        neighbors = [n for n in grid.neighbors(current) if n not in visited]
        if not neighbors:
            stack.pop()
            continue
        neighbor = rng.choice(neighbors)
        grid.link(current, neighbor)
        visited.add(neighbor)
        stack.append(neighbor)


def no_maze(grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> None:
    """Leave the grid unlinked."""


class Algorithm(Enum):
    BINARY_TREE = "binarytree"
    SIDEWINDER = "sidewinder"
    ALDOUS_BRODER = "aldousbroder"
    WILSONS = "wilsons"
    HUNT_AND_KILL = "huntandkill"
    RECURSIVE_BACKTRACKER = "recursivebacktracker"
    NONE = "none"

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Case-insensitive lookup; ``_``, ``-`` and spaces are ignored."""
        key = "".join(ch for ch in name.lower() if ch not in "_- ")
        try:
            return cls(key)
        except ValueError:
            log.error("Unknown algorithm requested", name=name)
            raise UnknownAlgorithmError(
                f"Unknown algorithm {name!r}; choose from {', '.join(a.value for a in cls)}"
            ) from None

    @property
    def generator(self) -> Callable[..., None]:
        return _GENERATORS[self]

    def on(self, grid: "Grid", rng: "MazeRNG", max_steps: Optional[int] = None) -> "Grid":
        """Carve this algorithm's maze into ``grid`` in place and return it."""
        if self is not Algorithm.NONE:
            ensure_single_region(grid)
        self.generator(grid, rng, max_steps=max_steps)
        log.info(
            "Maze generated",
            algorithm=self.value,
            topology=type(grid).__name__,
            cells=grid.size(),
            links=grid.link_count(),
            seed=rng.initial_seed,
        )
        return grid


_GENERATORS: Dict[Algorithm, Callable[..., None]] = {
    Algorithm.BINARY_TREE: binary_tree,
    Algorithm.SIDEWINDER: sidewinder,
    Algorithm.ALDOUS_BRODER: aldous_broder,
    Algorithm.WILSONS: wilsons,
    Algorithm.HUNT_AND_KILL: hunt_and_kill,
    Algorithm.RECURSIVE_BACKTRACKER: recursive_backtracker,
    Algorithm.NONE: no_maze,
}

SPANNING_ALGORITHMS = tuple(a for a in Algorithm if a is not Algorithm.NONE)

__all__ = [
    "Algorithm",
    "SPANNING_ALGORITHMS",
    "binary_tree",
    "sidewinder",
    "aldous_broder",
    "wilsons",
    "hunt_and_kill",
    "recursive_backtracker",
    "no_maze",
]
