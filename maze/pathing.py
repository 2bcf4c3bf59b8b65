"""
Pathing - flood fill distances, shortest paths and longest paths over a Grid

A Distances value is a snapshot: it keeps no reference to the grid it was
computed from. Recompute it after carving or blocking passages.
"""

import logging

from maze.coordinates import Coordinate

logger = logging.getLogger(__name__)


class Distances:
    """Hop counts from one start cell to every cell reachable from it"""

    def __init__(self, start, distances, max_distance):
        self._start = start
        self._distances = distances
        self._max_distance = max_distance

    def __repr__(self):
        return f"Distances(start={self._start}, reached={len(self._distances)}, max={self._max_distance})"

    @property
    def start(self):
        return self._start

    @property
    def max_distance(self):
        return self._max_distance

    def distance_to(self, coord):
        """Distance from the start, or None for unreached or invalid cells"""
        return self._distances.get(Coordinate(*coord))

    def furthest_points(self):
        """
        Every cell at the maximum distance, in the order the flood fill
        reached them.
        """
        return [c for c, d in self._distances.items() if d == self._max_distance]

    def items(self):
        return self._distances.items()

    def __contains__(self, coord):
        return Coordinate(*coord) in self._distances

    def __len__(self):
        return len(self._distances)


def compute_distances(grid, start, mask=None):
    """
    Breadth-first flood fill from `start` over the grid's passages.

    Every link costs one step, so the first time a cell is reached is also
    its shortest distance: no priority queue needed.

    Args:
        grid: Grid to measure
        start: Start coordinate
        mask: Optional mask; masked cells are neither started from nor entered

    Returns:
        Distances, or None if start is outside the grid or masked
    """
    if not grid.is_valid_coordinate(start):
        return None
    if mask is not None and mask.is_masked(start):
        return None

    start = Coordinate(*start)
    distances = {start: 0}
    max_distance = 0

    frontier = [start]
    while frontier:
        new_frontier = []
        for cell in frontier:
            distance_to_cell = distances[cell]
            if distance_to_cell > max_distance:
                max_distance = distance_to_cell

            links = grid.links(cell)
            if links is None:
                raise RuntimeError(f"Flood fill reached invalid cell {cell}")
            for linked in links:
                if linked in distances:
                    continue
                if mask is not None and mask.is_masked(linked):
                    continue
                distances[linked] = distance_to_cell + 1
                new_frontier.append(linked)
        frontier = new_frontier

    return Distances(start, distances, max_distance)


def shortest_path(grid, distances, end):
    """
    Walk back from `end` to the distances' start, always stepping to a linked
    neighbour strictly closer to the start.

    Returns:
        list of Coordinate from start to end, or None if end was not reached
        or the walk gets stuck (the grid changed since the distances were taken)
    """
    end_distance = distances.distance_to(end)
    if end_distance is None:
        return None

    current = Coordinate(*end)
    current_distance = end_distance
    path = [current]

    while current != distances.start:
        closest = None
        closest_distance = current_distance
        for neighbour in grid.neighbours(current):
            if not grid.is_linked(current, neighbour):
                continue
            d = distances.distance_to(neighbour)
            if d is not None and d < closest_distance:
                closest, closest_distance = neighbour, d

        if closest is None:
            logger.debug("No closer linked neighbour at %s (distance %d)", current, current_distance)
            return None

        current, current_distance = closest, closest_distance
        path.append(current)

    path.reverse()
    return path


def path_from_point(grid, point, mask=None):
    """
    Shortest path from `point` to the first of its furthest points.

    Returns:
        list of Coordinate, or None if point is invalid or masked
    """
    distances = compute_distances(grid, point, mask)
    if distances is None:
        return None
    return shortest_path(grid, distances, distances.furthest_points()[0])


def longest_path(grid, mask=None):
    """
    Longest path estimate by double flood fill: the furthest point from an
    arbitrary start is one end of the longest path, the furthest point from
    that is the other.

    Exact for a perfect maze. With disconnected regions (from a mask) only
    the region holding the arbitrary start is searched.

    Returns:
        list of Coordinate, or None if there is no unmasked start cell
    """
    if mask is None:
        arbitrary_start = Coordinate.from_row_column_indices(0, 0)
    else:
        arbitrary_start = mask.first_unmasked_coordinate()
        if arbitrary_start is None or not grid.is_valid_coordinate(arbitrary_start):
            # The mask and grid can differ in size
            arbitrary_start = next((c for c in grid.iter_cells() if not mask.is_masked(c)), None)
    if arbitrary_start is None:
        return None

    first_distances = compute_distances(grid, arbitrary_start, mask)
    if first_distances is None:
        return None

    path_start = first_distances.furthest_points()[0]
    distances_from_start = compute_distances(grid, path_start, mask)
    path_end = distances_from_start.furthest_points()[0]
    return shortest_path(grid, distances_from_start, path_end)
