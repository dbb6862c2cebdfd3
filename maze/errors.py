"""Exception types raised by the maze core."""


class MazeError(Exception):
    """Base class for all maze generation errors."""


class MaskParseError(MazeError, ValueError):
    """A mask file or image could not be turned into an occupancy grid."""


class InvalidLinkError(MazeError, AssertionError):
    """Two points that are not lattice neighbours were asked to be linked."""


class EmptyGridError(MazeError):
    """The grid has no unmasked cells to select from."""


class DisconnectedMaskError(MazeError):
    """The unmasked cells split into more than one lattice region."""


class IterationLimitError(MazeError, RuntimeError):
    """A random walk exceeded its configured step ceiling."""


class UnknownAlgorithmError(MazeError, ValueError):
    """No generation algorithm is registered under the requested name."""


__all__ = [
    "MazeError",
    "MaskParseError",
    "InvalidLinkError",
    "EmptyGridError",
    "DisconnectedMaskError",
    "IterationLimitError",
    "UnknownAlgorithmError",
]
