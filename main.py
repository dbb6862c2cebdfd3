# main.py
# Texture: a maze's texture is the tendency of an algorithm to produce a
# certain kind of maze. Binary Tree, for example, always carves north or east,
# so it leaves long corridors along the northern row and the eastern column.
# Bias: a tendency towards a texture.
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from engine.image_renderer import render_grid_image, render_polar_image, save_image
from engine.text_renderer import render_text
from maze import Algorithm, Mask, MazeError, PolarGrid, RectangularGrid
from maze.distances import Distances, distance_stats, longest_path
from maze_rng import MazeRNG
from utils.config import CONFIG_FILE, MazeConfig, load_maze_config
from utils.logging_utils import setup_logging

log = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a maze over a rectangular or polar lattice."
    )
    mask_group = parser.add_mutually_exclusive_group()
    mask_group.add_argument(
        "-w",
        "--mask",
        help="A text mask made of . and x characters (path to the .txt file).",
    )
    mask_group.add_argument(
        "-m",
        "--mask-image",
        help="An image mask; pure black pixels remove cells.",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        help="The algorithm to apply (default from config: recursivebacktracker).",
    )
    parser.add_argument("-t", "--to-png", action="store_true", help="Output the maze as a PNG image.")
    parser.add_argument(
        "-p",
        "--to-polar-png",
        action="store_true",
        help="Output the maze as a polar (circular) PNG image.",
    )
    parser.add_argument("-r", "--resolution", type=int, help="Pixels per cell in image output.")
    parser.add_argument(
        "-s",
        "--show-distances",
        action="store_true",
        help="Show BFS distances in the output.",
    )
    parser.add_argument(
        "--longest-path",
        action="store_true",
        help="Show distances only along the longest path through the maze.",
    )
    parser.add_argument("-o", "--output", action="store_true", help="Print the maze as text.")
    parser.add_argument("--seed", type=int, help="Seed for the random source.")
    parser.add_argument(
        "--max-steps",
        type=int,
        help="Walk-step ceiling for Aldous-Broder and Wilson's.",
    )
    parser.add_argument("--config", type=Path, help=f"YAML config file (default: {CONFIG_FILE}).")
    parser.add_argument("--log-level", help="Logging level name, e.g. debug or warning.")
    return parser


def load_config(path: Optional[Path]) -> MazeConfig:
    if path is not None:
        return load_maze_config(path)
    if CONFIG_FILE.is_file():
        return load_maze_config(CONFIG_FILE)
    log.warning("Default config missing, using built-in defaults", path=str(CONFIG_FILE))
    return MazeConfig()


def load_mask(args: argparse.Namespace, config: MazeConfig) -> Mask:
    if args.mask:
        return Mask.from_txt(args.mask)
    if args.mask_image:
        return Mask.from_image(args.mask_image)
    return Mask(config.width, config.height)


def overlay_for(grid, args: argparse.Namespace) -> Optional[Distances]:
    if args.longest_path:
        return longest_path(grid)
    if args.show_distances:
        distances = grid.compute_distances()
        stats = distance_stats(grid, distances)
        log.info(
            "Distance statistics",
            reached=stats.reached,
            unreached=stats.unreached,
            max_distance=stats.max_distance,
            mean_distance=round(stats.mean_distance, 2),
        )
        return distances
    return None


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "info")
    if args.resolution is not None and args.resolution <= 0:
        log.error("Resolution must be positive", resolution=args.resolution)
        return 2

    config = load_config(args.config)
    if args.log_level is None and config.log_level.lower() != "info":
        setup_logging(config.log_level)

    algorithm = Algorithm.from_name(args.algorithm or config.algorithm)
    seed = args.seed if args.seed is not None else config.seed
    max_steps = args.max_steps if args.max_steps is not None else config.max_steps
    resolution = args.resolution or config.resolution

    mask = load_mask(args, config)
    rng = MazeRNG(seed)
    log.info("Generating maze", algorithm=algorithm.value, seed=rng.initial_seed, mask=repr(mask))

    grid = algorithm.on(RectangularGrid.from_mask(mask), rng, max_steps=max_steps)
    distances = overlay_for(grid, args)

    if args.output:
        print(render_text(grid, distances))

    if args.to_png:
        save_image(render_grid_image(grid, resolution, distances), config.png_output)

    if args.to_polar_png:
        polar = algorithm.on(PolarGrid.from_mask(mask), rng, max_steps=max_steps)
        save_image(render_polar_image(polar, resolution), config.polar_png_output)

    return 0


def main() -> None:
    """Main entry point for the application."""
    try:
        sys.exit(run())
    except MazeError as e:
        log.critical("Maze generation failed", error=str(e), error_type=type(e).__name__)
        sys.exit(f"Maze generation failed: {e}")
    except FileNotFoundError as e:
        log.critical("Required file not found", error=str(e))
        sys.exit(f"File not found - {e}")


if __name__ == "__main__":
    main()
