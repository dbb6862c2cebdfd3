# maze/mask.py
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Union

import numpy as np
import structlog
from PIL import Image, UnidentifiedImageError

from maze.errors import EmptyGridError, MaskParseError
from maze.point import Point

if TYPE_CHECKING:
    from maze_rng import MazeRNG

log = structlog.get_logger(__name__)

CELL_PRESENT = "."
CELL_REMOVED = "x"


class Mask:
    """Boolean occupancy grid; ``True`` keeps the cell, ``False`` removes it."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            log.error("Invalid mask dimensions", width=width, height=height)
            raise ValueError("Mask width and height must be positive integers.")
        self.width = width
        self.height = height
        self.bits: np.ndarray = np.ones((height, width), dtype=bool, order="C")

    def __repr__(self) -> str:
        return f"Mask({self.width}x{self.height}, active={self.count()})"

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point[0] < self.width and 0 <= point[1] < self.height

    def set(self, point: Point, value: bool) -> None:
        if not self.in_bounds(point):
            raise IndexError(f"Point {tuple(point)} outside {self.width}x{self.height} mask")
        self.bits[point[1], point[0]] = bool(value)

    def get(self, point: Point) -> bool:
        if not self.in_bounds(point):
            return False
        return bool(self.bits[point[1], point[0]])

    __getitem__ = get

    def count(self) -> int:
        return int(np.count_nonzero(self.bits))

    def random_location(self, rng: "MazeRNG") -> Point:
        """Uniformly pick an active position."""
        ys, xs = np.nonzero(self.bits)
        if len(xs) == 0:
            raise EmptyGridError("Mask has no active positions")
        idx = rng.get_int(0, len(xs) - 1)
        return Point(int(xs[idx]), int(ys[idx]))

    # ------------------------------------------------------------------
    # loaders
    # ------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: str) -> "Mask":
        """Parse the ``"<w> <h>"`` header followed by rows of ``.``/``x``."""
        lines: List[str] = [line.rstrip("\r") for line in text.split("\n")]
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise MaskParseError("Mask text is empty")

        header = lines[0].split()
        if len(header) != 2:
            log.error("Malformed mask header", header=lines[0])
            raise MaskParseError(f"Expected '<width> <height>' header, got {lines[0]!r}")
        try:
            width, height = int(header[0]), int(header[1])
        except ValueError as e:
            log.error("Non-numeric mask header", header=lines[0])
            raise MaskParseError(f"Mask dimensions must be integers: {lines[0]!r}") from e
        if width <= 0 or height <= 0:
            raise MaskParseError(f"Mask dimensions must be positive: {width}x{height}")

        rows = lines[1:]
        if len(rows) != height:
            log.error("Mask row count mismatch", expected=height, found=len(rows))
            raise MaskParseError(f"Expected {height} mask rows, found {len(rows)}")

        mask = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                log.error("Mask row length mismatch", row=y, expected=width, found=len(row))
                raise MaskParseError(
                    f"Row {y} has {len(row)} characters, expected {width}"
                )
            for x, char in enumerate(row):
                if char == CELL_PRESENT:
                    mask.bits[y, x] = True
                elif char == CELL_REMOVED:
                    mask.bits[y, x] = False
                else:
                    log.error("Invalid character in mask", char=char, x=x, y=y)
                    raise MaskParseError(f"Invalid character {char!r} at ({x}, {y})")
        log.debug("Parsed text mask", width=width, height=height, active=mask.count())
        return mask

    @classmethod
    def from_txt(cls, file_path: Union[str, Path]) -> "Mask":
        path = Path(file_path)
        try:
            data = path.read_text(encoding="utf-8")
        except OSError as e:
            log.error("Failed to read mask file", path=str(path), error=str(e))
            raise MaskParseError(f"Cannot read mask file {path}: {e}") from e
        return cls.from_text(data)

    @classmethod
    def from_image(cls, file_path: Union[str, Path]) -> "Mask":
        """Pure black pixels remove cells; any other colour keeps them."""
        path = Path(file_path)
        try:
            with Image.open(path) as img:
                pixels = np.asarray(img.convert("RGB"))
        except (OSError, UnidentifiedImageError) as e:
            log.error("Failed to read mask image", path=str(path), error=str(e))
            raise MaskParseError(f"Cannot read mask image {path}: {e}") from e

        height, width = pixels.shape[:2]
        mask = cls(width, height)
        mask.bits[:] = np.any(pixels != 0, axis=2)
        log.debug("Loaded image mask", width=width, height=height, active=mask.count())
        return mask


__all__ = ["Mask", "CELL_PRESENT", "CELL_REMOVED"]
