"""
Tests for the edge list export.
"""

from maze.edge_list import edge_list_lines, edge_list_text, write_edge_list
from maze.generator import binary_tree
from maze.grid import Grid


class TestEdgeList:
    def test_header_and_one_based_indices(self, grid_2x2):
        assert list(edge_list_lines(grid_2x2)) == ["4 3", "1 2", "1 3", "3 4"]

    def test_empty_grid(self):
        assert edge_list_text(Grid(3, 2)) == "6 0\n"

    def test_maze_line_count(self, rng):
        grid = Grid(6, 5)
        binary_tree(grid, rng)
        lines = edge_list_text(grid).splitlines()
        assert lines[0] == "30 29"
        assert len(lines) == 30

    def test_write(self, tmp_path, grid_2x2):
        path = write_edge_list(grid_2x2, tmp_path / "out" / "edges.txt")
        assert path.read_text(encoding="utf-8") == "4 3\n1 2\n1 3\n3 4\n"
