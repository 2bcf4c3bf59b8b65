"""
Grid graph - rectangular grid cells as nodes, open passages as undirected edges

Node identity is the row-major cell index. The index width (uint8, uint16 or
uint32) is chosen per grid and bounds how many cells it can address.
"""

import logging
from enum import Enum, auto

import numpy as np

from maze.coordinates import ALL_DIRECTIONS, Coordinate, offset
from maze.iterators import BatchIter, CellIter
from utils.constants import NEIGHBOUR_SLOTS

logger = logging.getLogger(__name__)

SMALL_INDEX = np.uint8
MEDIUM_INDEX = np.uint16
LARGE_INDEX = np.uint32
INDEX_DTYPES = (SMALL_INDEX, MEDIUM_INDEX, LARGE_INDEX)


class LinkErrorKind(Enum):
    INVALID_COORDINATE = auto()
    SELF_LINK = auto()


class LinkError(ValueError):
    """A refused `Grid.link` request. The grid is left untouched."""
    kind = None

    def __init__(self, a, b):
        super().__init__(f"Cannot link {a} to {b}: {self.kind.name.lower().replace('_', ' ')}")
        self.a = a
        self.b = b


class SelfLinkError(LinkError):
    kind = LinkErrorKind.SELF_LINK


class InvalidCoordinateError(LinkError):
    kind = LinkErrorKind.INVALID_COORDINATE


def edges_capacity_hint(row_length, column_length):
    """Upper bound on passages in a fully open rectangular grid"""
    cells = row_length * column_length
    return max(0, 4 * cells - 4 * max(row_length, column_length))


def max_cells(index_dtype):
    """Largest cell count addressable with the index dtype"""
    return int(np.iinfo(index_dtype).max)


class Grid:
    """
    Undirected, unweighted, simple graph over the cells of a rectangular grid.

    Linking two cells opens a passage between them, no link means a wall.
    The graph does not check that linked cells are grid-adjacent; that is
    the caller's job. Per-cell links live in a numpy table of 4 slots per
    cell, widened only if some caller links a cell to more than 4 others.
    """

    def __init__(self, row_length, column_length, index_dtype=LARGE_INDEX):
        """
        Args:
            row_length: Cells per row (grid width)
            column_length: Cells per column (grid height)
            index_dtype: Unsigned numpy integer type used for node indices

        Raises:
            TypeError: index_dtype is not an unsigned integer type
            ValueError: negative dimensions, or more cells than index_dtype addresses
        """
        dtype = np.dtype(index_dtype)
        if dtype.kind != "u":
            raise TypeError(f"Grid index type must be an unsigned integer, got {dtype}")
        if row_length < 0 or column_length < 0:
            raise ValueError(f"Invalid grid dimensions {row_length}x{column_length}")

        cells = row_length * column_length
        if cells > max_cells(dtype):
            raise ValueError(f"{cells} cells do not fit a {dtype} grid index")

        self._row_length = row_length
        self._column_length = column_length
        self._dtype = dtype
        self._no_link = int(np.iinfo(dtype).max)

        self._adjacency = np.full((cells, NEIGHBOUR_SLOTS), self._no_link, dtype=dtype)
        self._edges = np.zeros((edges_capacity_hint(row_length, column_length), 2), dtype=dtype)
        self._edge_count = 0

    def __repr__(self):
        return (f"Grid(row_length={self._row_length}, column_length={self._column_length}, "
                f"links={self._edge_count}, index={self._dtype})")

    # ========== DIMENSIONS ==========

    @property
    def row_length(self):
        return self._row_length

    @property
    def column_length(self):
        return self._column_length

    @property
    def rows(self):
        return self._column_length

    @property
    def columns(self):
        return self._row_length

    @property
    def size(self):
        return self._row_length * self._column_length

    @property
    def index_dtype(self):
        return self._dtype

    @property
    def links_count(self):
        return self._edge_count

    @property
    def edges_capacity(self):
        return len(self._edges)

    def __len__(self):
        return self.size

    # ========== COORDINATES ==========

    def is_valid_coordinate(self, coord):
        """Is the coordinate within the grid's dimensions"""
        return self.coordinate_to_index(coord) is not None

    def coordinate_to_index(self, coord):
        """
        Convert a coordinate to its row-major node index.

        Returns:
            int in [0, size), or None if the coordinate is outside the grid
        """
        x, y = coord
        if 0 <= x < self._row_length and 0 <= y < self._column_length:
            return y * self._row_length + x
        return None

    def index_to_coordinate(self, index):
        if 0 <= index < self.size:
            return Coordinate.from_row_major_index(index, self._row_length)
        return None

    def random_cell(self, rng, mask=None):
        """
        Uniformly random cell, skipping masked cells.

        Returns:
            Coordinate, or None if the grid has no eligible cell
        """
        if mask is None:
            if self.size == 0:
                return None
            return Coordinate(rng.randrange(self._row_length), rng.randrange(self._column_length))

        candidates = [c for c in self.iter_cells() if not mask.is_masked(c)]
        if not candidates:
            return None
        return rng.choice(candidates)

    # ========== LINKING ==========

    def link(self, a, b):
        """
        Open a passage between two cells. Linking an existing pair is a no-op.

        Raises:
            SelfLinkError: a and b are the same cell
            InvalidCoordinateError: a or b is outside the grid
        """
        if a == b:
            raise SelfLinkError(a, b)

        index_a = self.coordinate_to_index(a)
        index_b = self.coordinate_to_index(b)
        if index_a is None or index_b is None:
            raise InvalidCoordinateError(a, b)

        if self._has_edge(index_a, index_b):
            return

        self._fill_slot(index_a, index_b)
        self._fill_slot(index_b, index_a)

        if self._edge_count == len(self._edges):
            self._grow_edges()
        self._edges[self._edge_count] = (index_a, index_b)
        self._edge_count += 1

    def unlink(self, a, b):
        """
        Close the passage between two cells, if there is one.

        Returns:
            bool: True if a passage was removed
        """
        index_a = self.coordinate_to_index(a)
        index_b = self.coordinate_to_index(b)
        if index_a is None or index_b is None or index_a == index_b:
            return False
        if not self._has_edge(index_a, index_b):
            return False

        self._clear_slot(index_a, index_b)
        self._clear_slot(index_b, index_a)

        edges = self._edges[:self._edge_count]
        hits = np.flatnonzero(((edges[:, 0] == index_a) & (edges[:, 1] == index_b)) |
                              ((edges[:, 0] == index_b) & (edges[:, 1] == index_a)))
        if hits.size == 0:
            raise RuntimeError(f"Adjacency of {a} and {b} has no matching edge record")

        # Swap-remove: the last edge takes the freed position
        last = self._edge_count - 1
        self._edges[hits[0]] = self._edges[last]
        self._edge_count = last
        return True

    def is_linked(self, a, b):
        """Are two cells in the grid linked?"""
        index_a = self.coordinate_to_index(a)
        index_b = self.coordinate_to_index(b)
        if index_a is None or index_b is None:
            return False
        return self._has_edge(index_a, index_b)

    def links(self, coord):
        """
        Cells linked to `coord` by a passage.

        Returns:
            list of Coordinate, or None if the coordinate is invalid
        """
        index = self.coordinate_to_index(coord)
        if index is None:
            return None
        row = self._adjacency[index]
        return [self._coordinate_at(int(other)) for other in row[row != self._no_link]]

    def iter_links(self):
        """Every passage as a (source, target) coordinate pair"""
        for source, target in self._edges[:self._edge_count].tolist():
            yield self._coordinate_at(source), self._coordinate_at(target)

    def edge_at(self, position):
        """The passage stored at `position` in [0, links_count), as coordinates"""
        if not 0 <= position < self._edge_count:
            raise IndexError(f"Edge position {position} out of range")
        source, target = self._edges[position].tolist()
        return self._coordinate_at(source), self._coordinate_at(target)

    def edge_indices(self):
        """Copy of the (links_count, 2) array of row-major node index pairs"""
        return self._edges[:self._edge_count].copy()

    # ========== NEIGHBOURS ==========

    def neighbours(self, coord):
        """
        Cells north, south, east or west of `coord` inside the grid, whether
        or not a passage leads to them.
        """
        if not self.is_valid_coordinate(coord):
            return []
        return [n for n in (self.neighbour_at_direction(coord, d) for d in ALL_DIRECTIONS)
                if n is not None]

    def neighbours_at_directions(self, coord, directions):
        return [self.neighbour_at_direction(coord, d) for d in directions]

    def neighbour_at_direction(self, coord, direction):
        if not self.is_valid_coordinate(coord):
            return None
        neighbour = offset(Coordinate(*coord), direction)
        if neighbour is not None and self.is_valid_coordinate(neighbour):
            return neighbour
        return None

    def is_neighbour_linked(self, coord, direction):
        neighbour = self.neighbour_at_direction(coord, direction)
        return neighbour is not None and self.is_linked(coord, neighbour)

    # ========== ITERATION ==========

    def iter_cells(self):
        return CellIter(self._row_length, self._column_length)

    def iter_rows(self):
        return BatchIter(BatchIter.ROWS, self._row_length, self._column_length)

    def iter_columns(self):
        return BatchIter(BatchIter.COLUMNS, self._row_length, self._column_length)

    def __iter__(self):
        return iter(self.iter_cells())

    # ========== INTERNALS ==========

    def _coordinate_at(self, index):
        return Coordinate.from_row_major_index(index, self._row_length)

    def _has_edge(self, index_a, index_b):
        return bool((self._adjacency[index_a] == index_b).any())

    def _fill_slot(self, index, other):
        free = np.flatnonzero(self._adjacency[index] == self._no_link)
        if free.size:
            slot = free[0]
        else:
            slot = self._adjacency.shape[1]
            self._widen_adjacency()
        self._adjacency[index, slot] = other

    def _clear_slot(self, index, other):
        slot = np.flatnonzero(self._adjacency[index] == other)[0]
        self._adjacency[index, slot] = self._no_link

    def _widen_adjacency(self):
        extra = np.full((self.size, NEIGHBOUR_SLOTS), self._no_link, dtype=self._dtype)
        self._adjacency = np.hstack((self._adjacency, extra))
        logger.debug("Adjacency widened to %d slots per cell", self._adjacency.shape[1])

    def _grow_edges(self):
        capacity = max(2 * len(self._edges), NEIGHBOUR_SLOTS)
        grown = np.zeros((capacity, 2), dtype=self._dtype)
        grown[:self._edge_count] = self._edges[:self._edge_count]
        self._edges = grown
        logger.debug("Edge storage grown to %d", capacity)


# ========== FACTORIES ==========

def _rect_grid(row_length, column_length, index_dtype):
    if row_length * column_length <= max_cells(index_dtype):
        return Grid(row_length, column_length, index_dtype)
    return None


def small_grid(row_length, column_length):
    """Grid with uint8 node indices, or None above 255 cells"""
    return _rect_grid(row_length, column_length, SMALL_INDEX)


def medium_grid(row_length, column_length):
    """Grid with uint16 node indices, or None above 65535 cells"""
    return _rect_grid(row_length, column_length, MEDIUM_INDEX)


def large_grid(row_length, column_length):
    """Grid with uint32 node indices, or None above 4294967295 cells"""
    return _rect_grid(row_length, column_length, LARGE_INDEX)


def grid_for_size(row_length, column_length):
    """Grid with the narrowest index type that fits the cell count"""
    for index_dtype in INDEX_DTYPES:
        grid = _rect_grid(row_length, column_length, index_dtype)
        if grid is not None:
            return grid
    return None
