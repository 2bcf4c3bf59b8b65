"""
Cell displays - what to draw inside each cell of a text rendered maze

A display maps a coordinate to a 3 glyph cell body. Displays hold their own
copies of distances or paths, never the grid.
"""

from maze.coordinates import Coordinate
from utils.constants import (
    CELL_BODY_WIDTH, EMPTY_CELL_BODY, END_CELL_BODY, PATH_CELL_BODY, START_CELL_BODY
)


class GridDisplay:
    """Shows nothing in every cell"""

    def render_cell_body(self, coord):
        return EMPTY_CELL_BODY


class DistancesDisplay(GridDisplay):
    """Distance from the start, as centred lowercase hex"""

    def __init__(self, distances):
        self.distances = distances

    def render_cell_body(self, coord):
        d = self.distances.distance_to(coord)
        if d is None:
            return EMPTY_CELL_BODY
        # Wider values would break the cell walls
        return f"{d:^{CELL_BODY_WIDTH}x}"[-CELL_BODY_WIDTH:]


class PathDisplay(GridDisplay):
    """Marks every cell on a path"""

    def __init__(self, path):
        self.on_path = {Coordinate(*c) for c in path}

    def render_cell_body(self, coord):
        if Coordinate(*coord) in self.on_path:
            return PATH_CELL_BODY
        return EMPTY_CELL_BODY


class StartEndPointsDisplay(GridDisplay):
    """Marks start cells with S and end cells with E"""

    def __init__(self, starts=(), ends=()):
        self.starts = {Coordinate(*c) for c in starts}
        self.ends = {Coordinate(*c) for c in ends}

    def render_cell_body(self, coord):
        coord = Coordinate(*coord)
        if coord in self.starts:
            return START_CELL_BODY
        if coord in self.ends:
            return END_CELL_BODY
        return EMPTY_CELL_BODY
