"""
Tests for pygame image rendering (headless).
"""

import pygame
import pytest

from maze.grid import Grid
from maze.masks import BinaryMask2D
from maze.pathing import compute_distances, shortest_path
from renderer import RenderOptions, render_grid, render_surface
from utils.colors import COLOR_BG, COLOR_DISTANCE_FAR, COLOR_MASKED, COLOR_WALL


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def corridor():
    """3x1 grid open from west to east."""
    grid = Grid(3, 1)
    grid.link((0, 0), (1, 0))
    grid.link((1, 0), (2, 0))
    return grid


class TestRenderOptions:
    def test_defaults(self):
        options = RenderOptions()
        assert options.cell_pixels == 10
        assert options.wall_pixels == 2
        assert not options.show_on_screen

    def test_wall_pixels_bounds(self):
        assert RenderOptions(cell_pixels=1).wall_pixels == 1
        assert RenderOptions(cell_pixels=255).wall_pixels == 8


class TestRenderSurface:
    def test_size(self):
        surface = render_surface(Grid(3, 2), RenderOptions(cell_pixels=10))
        assert surface.get_size() == (4 * 2 + 3 * 10, 3 * 2 + 2 * 10)

    def test_walls_and_cells(self, corridor):
        surface = render_surface(corridor, RenderOptions(cell_pixels=10))
        assert _rgb(surface, (0, 0)) == COLOR_WALL
        assert _rgb(surface, (7, 7)) == COLOR_BG
        # Open passage between the first two cells
        assert _rgb(surface, (13, 7)) == COLOR_BG

    def test_closed_wall(self):
        surface = render_surface(Grid(2, 1), RenderOptions(cell_pixels=10))
        assert _rgb(surface, (13, 7)) == COLOR_WALL

    def test_colour_distances(self, corridor):
        options = RenderOptions(cell_pixels=10, colour_distances=True,
                                distances=compute_distances(corridor, (0, 0)))
        surface = render_surface(corridor, options)
        assert _rgb(surface, (31, 7)) == COLOR_DISTANCE_FAR

    def test_masked_cells(self):
        mask = BinaryMask2D.from_text([".X."])
        surface = render_surface(Grid(3, 1), RenderOptions(cell_pixels=10, mask=mask))
        assert _rgb(surface, (19, 7)) == COLOR_MASKED
        assert _rgb(surface, (7, 7)) == COLOR_BG

    def test_path_and_markers(self, corridor):
        distances = compute_distances(corridor, (0, 0))
        options = RenderOptions(
            cell_pixels=16, show_path=True, path=shortest_path(corridor, distances, (2, 0)),
            mark_start_end=True, start=(0, 0), end=(2, 0),
        )
        surface = render_surface(corridor, options)
        assert _rgb(surface, (29, 11)) != COLOR_BG


class TestRenderGrid:
    def test_saves_png(self, tmp_path, corridor):
        out = tmp_path / "images" / "maze.png"
        surface = render_grid(corridor, RenderOptions(cell_pixels=10, output_file=out))
        assert out.exists()
        loaded = pygame.image.load(str(out))
        assert loaded.get_size() == surface.get_size()
