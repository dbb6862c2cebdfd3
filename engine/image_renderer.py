# engine/image_renderer.py
"""
Raster rendering of grids to PIL Images.

The rectangular renderer paints into a numpy RGB buffer with slice
assignment (every wall is axis-aligned); the polar renderer needs chords and
a circle, so it draws through ``ImageDraw``.
"""
from __future__ import annotations

import math
from pathlib import Path
from typing import Final, Optional, Tuple, Union

import numpy as np
import structlog
from PIL import Image, ImageDraw

from maze.cell import Cell
from maze.distances import Distances
from maze.grid import Grid
from maze.point import Direction
from maze.polar import PolarGrid

log = structlog.get_logger(__name__)

Color = Tuple[int, int, int]

WHITE: Final[Color] = (255, 255, 255)
BLACK: Final[Color] = (0, 0, 0)
DEFAULT_CELL_SIZE: Final[int] = 16


def background_color_for(cell: Cell, distances: Optional[Distances], max_distance: int) -> Color:
    """Green gradient: bright near the root, dark at the farthest cell."""
    if distances is None or max_distance <= 0:
        return BLACK
    distance = distances.distance(cell.point)
    if distance is None:
        return BLACK
    intensity = (max_distance - distance) / max_distance
    dark = int(255 * intensity)
    bright = 128 + int(127 * intensity)
    return (dark, bright, dark)


def render_grid_image(
    grid: Grid, cell_size: int = DEFAULT_CELL_SIZE, distances: Optional[Distances] = None
) -> Image.Image:
    """Draw a rectangular grid; masked positions stay black."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    img_width = grid.width * cell_size + 1
    img_height = grid.height * cell_size + 1
    pixels = np.zeros((img_height, img_width, 3), dtype=np.uint8)

    max_distance = distances.max(grid)[0] if distances is not None else 0

    # Backgrounds first so walls are never painted over
    if max_distance > 0:
        for cell in grid.iter_cells():
            x1, y1 = cell.point.x * cell_size, cell.point.y * cell_size
            pixels[y1:y1 + cell_size + 1, x1:x1 + cell_size + 1] = background_color_for(
                cell, distances, max_distance
            )

    for cell in grid.iter_cells():
        x1, y1 = cell.point.x * cell_size, cell.point.y * cell_size
        x2, y2 = x1 + cell_size, y1 + cell_size
        if not cell.is_linked_towards(Direction.NORTH):
            pixels[y1, x1:x2 + 1] = WHITE
        if not cell.is_linked_towards(Direction.WEST):
            pixels[y1:y2 + 1, x1] = WHITE
        if not cell.is_linked_towards(Direction.EAST):
            pixels[y1:y2 + 1, x2] = WHITE
        if not cell.is_linked_towards(Direction.SOUTH):
            pixels[y2, x1:x2 + 1] = WHITE

    return Image.fromarray(pixels)


def render_polar_image(grid: PolarGrid, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """Draw a polar grid: each row is a ring, each column an equal sector."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    img_size = 2 * cell_size * grid.height
    img = Image.new("RGB", (img_size + 1, img_size + 1), BLACK)
    draw = ImageDraw.Draw(img)
    center = img_size // 2
    theta = 2 * math.pi / grid.width

    def _at(radius: int, angle: float) -> Tuple[int, int]:
        return (
            center + round(radius * math.cos(angle)),
            center + round(radius * math.sin(angle)),
        )

    for ring in range(grid.height):
        if grid.cells_in_ring(ring) == 0:
            continue
        inner_radius = ring * cell_size
        outer_radius = (ring + 1) * cell_size
        for cell in grid.cells[ring * grid.width:(ring + 1) * grid.width]:
            if cell is None:
                continue
            theta_ccw = cell.point.x * theta
            theta_cw = (cell.point.x + 1) * theta
            a = _at(inner_radius, theta_ccw)
            c = _at(inner_radius, theta_cw)
            d = _at(outer_radius, theta_cw)

            if not cell.is_linked(grid.inward(cell.point)):
                draw.line([a, c], fill=WHITE)
            _, clockwise = grid.angular_neighbors(cell.point)
            if not cell.is_linked(clockwise):
                draw.line([c, d], fill=WHITE)

    radius = grid.height * cell_size
    draw.ellipse(
        [center - radius, center - radius, center + radius, center + radius],
        outline=WHITE,
    )
    return img


def save_image(img: Image.Image, path: Union[str, Path]) -> Path:
    path = Path(path)
    try:
        img.save(path)
    except OSError as e:
        log.error("Failed to save maze image", path=str(path), error=str(e))
        raise
    log.info("Maze image saved", path=str(path), width=img.width, height=img.height)
    return path


__all__ = [
    "WHITE",
    "BLACK",
    "DEFAULT_CELL_SIZE",
    "background_color_for",
    "render_grid_image",
    "render_polar_image",
    "save_image",
]
