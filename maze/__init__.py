"""Maze-graph engine: lattice model, masks, generation algorithms and distances."""

from .point import Direction, Point
from .mask import Mask
from .cell import Cell, NeighborPoint
from .distances import Distances, DistanceStats, distance_stats, longest_path
from .grid import Grid, RectangularGrid
from .polar import PolarGrid
from .algorithms import Algorithm, SPANNING_ALGORITHMS
from .errors import (
    DisconnectedMaskError,
    EmptyGridError,
    InvalidLinkError,
    IterationLimitError,
    MaskParseError,
    MazeError,
    UnknownAlgorithmError,
)

__all__ = [
    "Direction",
    "Point",
    "Mask",
    "Cell",
    "NeighborPoint",
    "Distances",
    "DistanceStats",
    "distance_stats",
    "longest_path",
    "Grid",
    "RectangularGrid",
    "PolarGrid",
    "Algorithm",
    "SPANNING_ALGORITHMS",
    "MazeError",
    "MaskParseError",
    "InvalidLinkError",
    "EmptyGridError",
    "DisconnectedMaskError",
    "IterationLimitError",
    "UnknownAlgorithmError",
]
