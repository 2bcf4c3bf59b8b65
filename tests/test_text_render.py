"""
Tests for cell displays and box drawing text rendering.
"""

import pytest

from maze.displays import DistancesDisplay, GridDisplay, PathDisplay, StartEndPointsDisplay
from maze.generator import sidewinder
from maze.grid import Grid
from maze.pathing import compute_distances
from maze.text_render import CORNERS, render_text


class TestDisplays:
    def test_blank(self):
        assert GridDisplay().render_cell_body((0, 0)) == "   "

    def test_distances_hex(self):
        grid = Grid(20, 1)
        for x in range(19):
            grid.link((x, 0), (x + 1, 0))
        display = DistancesDisplay(compute_distances(grid, (0, 0)))
        assert display.render_cell_body((0, 0)) == " 0 "
        assert display.render_cell_body((10, 0)) == " a "
        assert display.render_cell_body((17, 0)) == "11 "

    def test_distances_unreached(self):
        display = DistancesDisplay(compute_distances(Grid(2, 1), (0, 0)))
        assert display.render_cell_body((1, 0)) == "   "

    def test_distances_stay_three_wide(self):
        grid = Grid(300, 1)
        for x in range(299):
            grid.link((x, 0), (x + 1, 0))
        display = DistancesDisplay(compute_distances(grid, (0, 0)))
        assert display.render_cell_body((299, 0)) == "12b"
        assert all(len(display.render_cell_body(c)) == 3 for c in grid.iter_cells())

    def test_path(self):
        display = PathDisplay([(0, 0), (1, 0)])
        assert display.render_cell_body((1, 0)) == " . "
        assert display.render_cell_body((0, 1)) == "   "

    def test_start_end_points(self):
        display = StartEndPointsDisplay(starts=[(0, 0)], ends=[(1, 1)])
        assert display.render_cell_body((0, 0)) == " S "
        assert display.render_cell_body((1, 1)) == " E "
        assert display.render_cell_body((1, 0)) == "   "


class TestRenderText:
    def test_empty_grid(self):
        assert render_text(Grid(0, 0)) == ""

    def test_single_cell(self):
        assert render_text(Grid(1, 1)) == "┌───┐\n│   │\n└───┘\n"

    def test_linked_pair(self):
        grid = Grid(2, 1)
        grid.link((0, 0), (1, 0))
        assert render_text(grid) == (
            "┌───────┐\n"
            "│       │\n"
            "└───────┘\n"
        )

    def test_unlinked_pair(self):
        assert render_text(Grid(2, 1)) == (
            "┌───┬───┐\n"
            "│   │   │\n"
            "└───┴───┘\n"
        )

    def test_corridor_2x2(self, grid_2x2):
        assert render_text(grid_2x2) == (
            "┌───────┐\n"
            "│       │\n"
            "│   ╶───┤\n"
            "│       │\n"
            "└───────┘\n"
        )

    def test_closed_2x2(self):
        assert render_text(Grid(2, 2)) == (
            "┌───┬───┐\n"
            "│   │   │\n"
            "├───┼───┤\n"
            "│   │   │\n"
            "└───┴───┘\n"
        )

    def test_display_bodies(self, grid_2x2):
        display = StartEndPointsDisplay(starts=[(1, 0)], ends=[(1, 1)])
        lines = render_text(grid_2x2, display).splitlines()
        assert lines[1] == "│     S │"
        assert lines[3] == "│     E │"

    @pytest.mark.parametrize("width,height", [(1, 5), (5, 1), (7, 4)])
    def test_line_shape(self, width, height, rng):
        grid = Grid(width, height)
        sidewinder(grid, rng)
        lines = render_text(grid).splitlines()
        assert len(lines) == 2 * height + 1
        assert all(len(line) == 4 * width + 1 for line in lines)

    def test_corner_table_complete(self):
        assert len(CORNERS) == 16
