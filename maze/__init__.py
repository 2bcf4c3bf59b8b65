"""
Maze Module - grid graph, maze generators and pathing
"""

from .coordinates import Coordinate, Direction, offset
from .grid import (
    Grid, LinkError, LinkErrorKind, SelfLinkError, InvalidCoordinateError,
    small_grid, medium_grid, large_grid, grid_for_size
)
from .masks import BinaryMask2D
from .generator import (
    GEN_ALGOS, binary_tree, sidewinder, aldous_broder, wilson, hunt_and_kill,
    recursive_backtracker, rebuild_random_walls
)
from .pathing import Distances, compute_distances, shortest_path, longest_path

__all__ = ['Coordinate', 'Direction', 'offset',
           'Grid', 'LinkError', 'LinkErrorKind', 'SelfLinkError', 'InvalidCoordinateError',
           'small_grid', 'medium_grid', 'large_grid', 'grid_for_size',
           'BinaryMask2D',
           'GEN_ALGOS', 'binary_tree', 'sidewinder', 'aldous_broder', 'wilson',
           'hunt_and_kill', 'recursive_backtracker', 'rebuild_random_walls',
           'Distances', 'compute_distances', 'shortest_path', 'longest_path']
