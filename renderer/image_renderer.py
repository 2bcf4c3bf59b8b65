"""
Image Renderer - draw a grid onto a pygame surface, save it, show it

The block map gives the wall layout; each block is scaled up to pixels with
walls drawn thin and cell interiors `cell_pixels` wide.
"""

import logging
from pathlib import Path

import numpy as np
import pygame

from maze.coordinates import Coordinate
from renderer.blockmap import grid_to_blockmap
from utils.colors import (
    COLOR_BG, COLOR_DISTANCE_FAR, COLOR_DISTANCE_NEAR, COLOR_END, COLOR_MASKED, COLOR_PATH,
    COLOR_START, COLOR_TEXT, COLOR_WALL
)
from utils.constants import DEFAULT_CELL_PIXELS, FPS, WINDOW_TITLE
from utils.helpers import clamp, color_lerp

logger = logging.getLogger(__name__)


class RenderOptions:
    """Options for a single image rendering"""
    def __init__(self, **kwargs):
        self.cell_pixels = kwargs.get('cell_pixels', DEFAULT_CELL_PIXELS)
        self.show_on_screen = kwargs.get('show_on_screen', False)
        self.output_file = kwargs.get('output_file', None)

        # Shading and markers
        self.colour_distances = kwargs.get('colour_distances', False)
        self.distances = kwargs.get('distances', None)
        self.show_path = kwargs.get('show_path', False)
        self.path = kwargs.get('path', None)
        self.mark_start_end = kwargs.get('mark_start_end', False)
        self.start = kwargs.get('start', None)
        self.end = kwargs.get('end', None)
        self.mask = kwargs.get('mask', None)

    @property
    def wall_pixels(self):
        return clamp(self.cell_pixels // 5, 1, 8)


def _block_sizes(count, cell_pixels, wall_pixels):
    """Pixel size of each block along one axis: wall, cell, wall, ..., wall"""
    sizes = np.full(2 * count + 1, wall_pixels, dtype=np.int64)
    sizes[1::2] = cell_pixels
    return sizes


def _cell_colours(grid, options):
    """(rows, cols, 3) uint8 background colour of each cell"""
    colours = np.empty((grid.rows, grid.columns, 3), dtype=np.uint8)
    colours[:] = COLOR_BG

    distances = options.distances
    if options.colour_distances and distances is not None:
        furthest = max(distances.max_distance, 1)
        for coord, d in distances.items():
            colours[coord.y, coord.x] = color_lerp(COLOR_DISTANCE_NEAR, COLOR_DISTANCE_FAR, d / furthest)

    if options.mask is not None:
        for coord in grid.iter_cells():
            if options.mask.is_masked(coord):
                colours[coord.y, coord.x] = COLOR_MASKED
    return colours


def _cell_centre(coord, x_offsets, y_offsets, cell_pixels):
    bx = 2 * coord.x + 1
    by = 2 * coord.y + 1
    return (int(x_offsets[bx]) + cell_pixels // 2, int(y_offsets[by]) + cell_pixels // 2)


def render_surface(grid, options):
    """
    Draw the grid.

    Args:
        grid: Grid to draw
        options: RenderOptions

    Returns:
        pygame.Surface
    """
    cell_pixels = options.cell_pixels
    wall_pixels = options.wall_pixels
    blockmap = grid_to_blockmap(grid)

    # Colour every block: cell interiors and open passages take the cell's
    # colour, solid blocks are walls
    colours = _cell_colours(grid, options)
    blocks = np.empty(blockmap.shape + (3,), dtype=np.uint8)
    blocks[:] = COLOR_BG
    blocks[1::2, 1::2] = colours
    blocks[1::2, 2:-1:2] = colours[:, :-1]   # passages east of each cell
    blocks[2:-1:2, 1::2] = colours[:-1, :]   # passages south of each cell
    blocks[blockmap > 0] = COLOR_WALL

    x_sizes = _block_sizes(grid.columns, cell_pixels, wall_pixels)
    y_sizes = _block_sizes(grid.rows, cell_pixels, wall_pixels)
    pixels = np.repeat(np.repeat(blocks, y_sizes, axis=0), x_sizes, axis=1)
    surface = pygame.surfarray.make_surface(pixels.transpose(1, 0, 2))

    x_offsets = np.concatenate(([0], np.cumsum(x_sizes)))
    y_offsets = np.concatenate(([0], np.cumsum(y_sizes)))

    if options.show_path and options.path and len(options.path) > 1:
        points = [_cell_centre(c, x_offsets, y_offsets, cell_pixels) for c in options.path]
        pygame.draw.lines(surface, COLOR_PATH, False, points, max(1, cell_pixels // 4))

    if options.mark_start_end:
        for coord, colour, label in ((options.start, COLOR_START, "S"), (options.end, COLOR_END, "E")):
            if coord is None or not grid.is_valid_coordinate(coord):
                continue
            centre = _cell_centre(Coordinate(*coord), x_offsets, y_offsets, cell_pixels)
            _draw_marker(surface, centre, colour, label, cell_pixels)

    return surface


def _draw_marker(surface, centre, colour, label, cell_pixels):
    radius = max(1, cell_pixels // 2 - 1)
    pygame.draw.circle(surface, colour, centre, radius)
    if cell_pixels >= 12:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, cell_pixels)
        text = font.render(label, True, COLOR_TEXT)
        surface.blit(text, text.get_rect(center=centre))


def save_surface(surface, path):
    """Save a surface as PNG, creating parent directories"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))
    logger.debug("Saved maze image to %s", path)
    return path


def show_surface(surface):
    """Show a surface in a window until it is closed or Q/Esc is pressed"""
    pygame.init()
    screen = pygame.display.set_mode(surface.get_size())
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    running = True
    while running:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE):
                running = False

        screen.blit(surface, (0, 0))
        pygame.display.flip()

    pygame.quit()


def render_grid(grid, options):
    """
    Render the grid, then save it and/or show it according to the options.

    Returns:
        pygame.Surface
    """
    surface = render_surface(grid, options)
    if options.output_file:
        save_surface(surface, options.output_file)
    if options.show_on_screen:
        show_surface(surface)
    return surface
