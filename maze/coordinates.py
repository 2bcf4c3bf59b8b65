"""
Grid coordinates and compass directions
"""

from enum import Enum
from typing import NamedTuple

from utils.constants import DIR_TO_BITS


class Direction(Enum):
    """Compass directions on a rectangular grid, valued by (dx, dy) offset"""
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return _OPPOSITES[self]

    @property
    def is_vertical(self):
        return self.dx == 0

    @property
    def wall_bits(self):
        """(own wall bit, opposite cell's wall bit) for wall bitmask views"""
        return DIR_TO_BITS[self.value]

    def perpendiculars(self):
        """The two directions at right angles to this one"""
        if self.is_vertical:
            return (Direction.EAST, Direction.WEST)
        return (Direction.NORTH, Direction.SOUTH)


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

ALL_DIRECTIONS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
VERTICAL_DIRECTIONS = (Direction.NORTH, Direction.SOUTH)
HORIZONTAL_DIRECTIONS = (Direction.EAST, Direction.WEST)


class Coordinate(NamedTuple):
    """
    Address of a cell in row-major 2D space.

    x is the column index, y the row index. Equality, ordering and hashing
    are by value.
    """
    x: int
    y: int

    @classmethod
    def from_row_major_index(cls, index, row_length):
        """
        Args:
            index: Flat row-major index
            row_length: Number of cells in one row of the grid

        Returns:
            Coordinate of the cell at that index
        """
        y, x = divmod(index, row_length)
        return cls(x, y)

    @classmethod
    def from_row_column_indices(cls, column_index, row_index):
        return cls(column_index, row_index)

    def row_major_index(self, row_length):
        return self.y * row_length + self.x

    def offset(self, direction):
        return offset(self, direction)

    def __str__(self):
        return f"({self.x}, {self.y})"


def offset(coordinate, direction):
    """
    Coordinate one step from `coordinate` towards `direction`.

    Only checks representability: North from row 0 and West from column 0
    give None. Grid bounds are the grid's business.
    """
    x = coordinate.x + direction.dx
    y = coordinate.y + direction.dy
    if x < 0 or y < 0:
        return None
    return Coordinate(x, y)
