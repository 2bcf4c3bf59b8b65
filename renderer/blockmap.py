"""
Block Map - turn a grid's passages into a solid block map for drawing

A grid of cols x rows cells becomes a (2*rows+1) x (2*cols+1) block map:
  - cell interiors sit at odd [2*y+1, 2*x+1] and are always empty
  - wall segments sit between them and are solid unless a passage is open
  - corner posts at even [2*y, 2*x] are solid when any touching segment is
"""

import numpy as np
from numba import int32, njit

from utils.constants import ALL_WALLS, BOTTOM, LEFT, RIGHT, TOP


@njit(cache=True)
def carve_edges(walls, edges, cols):
    """
    Clear the wall bits of every passage in `edges`.

    Args:
        walls: 1D int32 array (rows*cols) of wall bitmasks, modified in place
        edges: 2D int64 array (n, 2) of row-major cell index pairs
        cols: cells per row

    Edges between cells that are not grid-adjacent are skipped.
    """
    for e in range(edges.shape[0]):
        a = edges[e, 0]
        b = edges[e, 1]
        dx = b % cols - a % cols
        dy = b // cols - a // cols

        if dx == 1 and dy == 0:
            walls[a] &= ~int32(RIGHT)
            walls[b] &= ~int32(LEFT)
        elif dx == -1 and dy == 0:
            walls[a] &= ~int32(LEFT)
            walls[b] &= ~int32(RIGHT)
        elif dx == 0 and dy == 1:
            walls[a] &= ~int32(BOTTOM)
            walls[b] &= ~int32(TOP)
        elif dx == 0 and dy == -1:
            walls[a] &= ~int32(TOP)
            walls[b] &= ~int32(BOTTOM)


def grid_to_walls(grid):
    """
    Wall bitmask per cell (TOP | RIGHT | BOTTOM | LEFT set where walled).

    Returns:
        1D int32 array of length grid.size, row-major
    """
    walls = np.full(grid.size, ALL_WALLS, dtype=np.int32)
    edges = grid.edge_indices().astype(np.int64)
    if edges.shape[0]:
        carve_edges(walls, edges, grid.columns)
    return walls


@njit(cache=True)
def walls_to_blockmap(walls, cols, rows):
    """
    Convert a 1D wall bitmask array into a 2D block map.

    Args:
        walls: 1D int32 array (rows*cols), one bitmask per cell
        cols: cells per row
        rows: cells per column

    Returns:
        blockmap: 2D int32 array (2*rows+1, 2*cols+1), 1=solid, 0=empty
    """
    bm_w = 2 * cols + 1
    bm_h = 2 * rows + 1
    blockmap = np.zeros((bm_h, bm_w), dtype=np.int32)

    for cy in range(rows):
        for cx in range(cols):
            w = walls[cy * cols + cx]
            if (w & TOP) != 0:
                blockmap[2 * cy, 2 * cx + 1] = 1
            if (w & BOTTOM) != 0:
                blockmap[2 * cy + 2, 2 * cx + 1] = 1
            if (w & LEFT) != 0:
                blockmap[2 * cy + 1, 2 * cx] = 1
            if (w & RIGHT) != 0:
                blockmap[2 * cy + 1, 2 * cx + 2] = 1

    # Corner posts
    for by in range(0, bm_h, 2):
        for bx in range(0, bm_w, 2):
            if ((by > 0 and blockmap[by - 1, bx] > 0)
                    or (by < bm_h - 1 and blockmap[by + 1, bx] > 0)
                    or (bx > 0 and blockmap[by, bx - 1] > 0)
                    or (bx < bm_w - 1 and blockmap[by, bx + 1] > 0)):
                blockmap[by, bx] = 1

    return blockmap


def grid_to_blockmap(grid):
    return walls_to_blockmap(grid_to_walls(grid), grid.columns, grid.rows)
