"""
Tests for coordinates and directions.
"""

import pytest

from maze.coordinates import (
    ALL_DIRECTIONS, HORIZONTAL_DIRECTIONS, VERTICAL_DIRECTIONS, Coordinate, Direction, offset
)
from utils.constants import BOTTOM, LEFT, RIGHT, TOP


class TestCoordinate:
    def test_row_major_round_trip(self):
        for index in range(12):
            coord = Coordinate.from_row_major_index(index, 4)
            assert coord.row_major_index(4) == index

    def test_from_row_major_index(self):
        assert Coordinate.from_row_major_index(5, 3) == Coordinate(2, 1)
        assert Coordinate.from_row_major_index(0, 3) == Coordinate(0, 0)

    def test_from_row_column_indices(self):
        assert Coordinate.from_row_column_indices(3, 1) == Coordinate(3, 1)

    def test_equality_and_hash_by_value(self):
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert Coordinate(1, 2) == (1, 2)
        assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2

    def test_str(self):
        assert str(Coordinate(3, 4)) == "(3, 4)"


class TestOffset:
    def test_steps(self):
        c = Coordinate(1, 1)
        assert offset(c, Direction.NORTH) == Coordinate(1, 0)
        assert offset(c, Direction.SOUTH) == Coordinate(1, 2)
        assert offset(c, Direction.EAST) == Coordinate(2, 1)
        assert offset(c, Direction.WEST) == Coordinate(0, 1)

    def test_unrepresentable_steps_are_absent(self):
        assert offset(Coordinate(0, 0), Direction.NORTH) is None
        assert offset(Coordinate(0, 0), Direction.WEST) is None

    def test_no_grid_bounds_check(self):
        assert Coordinate(100, 100).offset(Direction.SOUTH) == Coordinate(100, 101)


class TestDirection:
    def test_opposites(self):
        for direction in ALL_DIRECTIONS:
            assert direction.opposite.opposite is direction
            assert direction.opposite is not direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_perpendiculars(self, direction):
        expected = HORIZONTAL_DIRECTIONS if direction in VERTICAL_DIRECTIONS else VERTICAL_DIRECTIONS
        assert set(direction.perpendiculars()) == set(expected)

    def test_wall_bits(self):
        assert Direction.NORTH.wall_bits == (TOP, BOTTOM)
        assert Direction.EAST.wall_bits == (RIGHT, LEFT)
        for direction in ALL_DIRECTIONS:
            own, other = direction.wall_bits
            assert direction.opposite.wall_bits == (other, own)

    def test_all_directions_order(self):
        assert ALL_DIRECTIONS == (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)

