"""
Mazes - command line driver

Generates a maze on a square or rectangular grid with one of six
algorithms, then renders it as text and/or as an image, optionally with
distances, the shortest path between two points or start/end markers.

Usage examples:
    python main.py                                   # sidewinder, shown on screen
    python main.py --grid-size 10 render wilson --text --show-path
    python main.py --mask-file mask.png render recursive-backtracker --image --image-out maze.png
"""

import argparse
import logging
import random
import sys
from pathlib import Path

import pygame

from maze.displays import DistancesDisplay, PathDisplay, StartEndPointsDisplay
from maze.edge_list import write_edge_list
from maze.generator import GEN_ALGOS, generate, rebuild_random_walls
from maze.grid import LinkError, grid_for_size
from maze.masks import BinaryMask2D
from maze.pathing import compute_distances, longest_path, path_from_point, shortest_path
from maze.settings import ConfigError, MazeConfig
from maze.text_render import render_text
from renderer import RenderOptions, render_grid
from utils.constants import DEFAULT_CELL_PIXELS, DEFAULT_GRID_SIZE

logger = logging.getLogger("mazes")


class MazeError(Exception):
    """A run that cannot continue, reported to the user without a traceback"""


def build_parser():
    parser = argparse.ArgumentParser(prog="mazes", description="Generate, solve and render perfect mazes.")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE,
                        help="The grid size is n * n (default: %(default)s)")
    parser.add_argument("--width", type=int, help="Grid width, overrides --grid-size")
    parser.add_argument("--height", type=int, help="Grid height, overrides --grid-size")
    parser.add_argument("--mask-file",
                        help="Image whose dark pixels mask off the matching grid cells")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible maze")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command")
    render = commands.add_parser("render", help="Generate a maze with a chosen algorithm and render it")
    render.add_argument("algorithm", choices=[a.name for a in GEN_ALGOS])
    render.add_argument("--rebuild-walls", type=int, default=0, metavar="N",
                        help="Block N random passages afterwards, relinking their cells elsewhere")

    points = render.add_argument_group("path end points")
    points.add_argument("--start-point", type=int, nargs=2, metavar=("X", "Y"))
    points.add_argument("--end-point", type=int, nargs=2, metavar=("X", "Y"))
    points.add_argument("--furthest-end-point", action="store_true",
                        help="End at the point furthest from the start")

    text = render.add_argument_group("text output")
    text.add_argument("--text", action="store_true", help="Render the maze as text")
    text.add_argument("--text-out", help="Write the text rendering to this file instead of stdout")
    cell_bodies = text.add_mutually_exclusive_group()
    cell_bodies.add_argument("--show-distances", action="store_true",
                             help="Show the distance from the start point to every cell")
    cell_bodies.add_argument("--show-path", action="store_true",
                             help="Show the path from the start point to the end point")

    image = render.add_argument_group("image output")
    image.add_argument("--image", action="store_true", help="Render the maze as an image")
    image.add_argument("--image-out", help="PNG file to save the image to")
    image.add_argument("--cell-pixels", type=int, default=DEFAULT_CELL_PIXELS,
                       help="Pixels per cell side, max 255 (default: %(default)s)")
    image.add_argument("--colour-distances", action="store_true",
                       help="Shade cells by distance from the start point")
    image.add_argument("--mark-start-end", action="store_true", help="Mark the start and end points")
    image.add_argument("--screen-view", action="store_true",
                       help="Also show the image on screen when saving it")

    render.add_argument("--edges-out", help="Write the maze's edge list to this file")
    return parser


# ========== PATH END POINTS ==========

def longest_path_from_constraints(grid, config, mask):
    """
    The path the start and end points default to:
      - both points given: the path between them
      - one point given: the path from it to its furthest point
      - no points: the longest path in the maze
    """
    start, end = config.start_point, config.end_point
    if start is not None and end is not None:
        distances = compute_distances(grid, start, mask)
        if distances is None:
            raise MazeError(f"Provided invalid start coordinate {start}.")
        return shortest_path(grid, distances, end) or []

    if start is not None or end is not None:
        point = start if start is not None else end
        path = path_from_point(grid, point, mask)
        if path is None:
            raise MazeError(f"Provided invalid coordinate {point}.")
        # A lone end point is where the path finishes
        return path if start is not None else path[::-1]

    return longest_path(grid, mask) or []


def get_start_point(config, path):
    if config.start_point is not None:
        return config.start_point
    if config.requires_start_and_end_point and path:
        return tuple(path[0])
    return None


def get_end_point(config, path):
    if config.end_point is not None:
        return config.end_point
    if config.requires_start_and_end_point and path:
        return tuple(path[-1])
    return None


def _distances_from(grid, start, mask):
    if start is None:
        raise MazeError("No start point to measure distances from.")
    distances = compute_distances(grid, start, mask)
    if distances is None:
        raise MazeError("Provided invalid start coordinate from which to show path distances.")
    return distances


# ========== OUTPUTS ==========

def choose_display(grid, config, start, end, mask):
    """Decide what the text rendering shows inside each cell"""
    if config.show_distances or config.show_path:
        distances = _distances_from(grid, start, mask)
        if config.show_distances:
            return DistancesDisplay(distances)

        path = shortest_path(grid, distances, end) if end is not None else None
        if path:
            return PathDisplay(path)
        logger.warning("No path from %s to %s, marking the end points only", start, end)

    starts = [start] if start is not None else []
    ends = [end] if end is not None else []
    return StartEndPointsDisplay(starts, ends)


def write_text(text, file_name):
    path = Path(file_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def render_image(grid, config, start, end, mask):
    distances = None
    path = None
    if config.colour_distances or config.mark_start_end or config.show_path:
        distances = _distances_from(grid, start, mask)
    if config.show_path and end is not None:
        path = shortest_path(grid, distances, end)

    options = RenderOptions(
        cell_pixels=config.cell_pixels,
        show_on_screen=config.screen_view or not config.image_out,
        output_file=config.image_out,
        colour_distances=config.colour_distances,
        distances=distances,
        show_path=config.show_path,
        path=path,
        mark_start_end=config.mark_start_end,
        start=start,
        end=end,
        mask=mask,
    )
    render_grid(grid, options)


# ========== MAIN ==========

def run(config):
    rng = random.Random(config.seed)
    mask = BinaryMask2D.from_image(config.mask_file) if config.mask_file else None

    grid = grid_for_size(config.width, config.height)
    if grid is None:
        raise MazeError(f"A {config.width}x{config.height} grid is too large.")

    generate(grid, config.algorithm, rng, mask)
    if config.rebuild_walls:
        rebuild_random_walls(grid, config.rebuild_walls, rng, mask)

    path = longest_path_from_constraints(grid, config, mask)
    start = get_start_point(config, path)
    end = get_end_point(config, path)

    if config.do_text_render:
        text = render_text(grid, choose_display(grid, config, start, end, mask))
        if config.text_out:
            write_text(text, config.text_out)
        else:
            print(text, end="")

    if config.do_image_render:
        render_image(grid, config, start, end, mask)

    if config.edges_out:
        write_edge_list(grid, config.edges_out)

    return grid


def exit_with_msg(message):
    print(message, file=sys.stderr)
    return 1


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s: %(message)s')

    config = MazeConfig.from_args(args)
    try:
        config.validate()
        run(config)
    except (MazeError, ConfigError, LinkError, OSError, pygame.error) as e:
        return exit_with_msg(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
