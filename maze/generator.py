"""
Maze generation algorithms

Every generator carves passages into a Grid in place and leaves a perfect
maze behind: a spanning tree over each connected region of unmasked cells.
Randomness comes from the `rng` argument (a random.Random) so a seeded rng
reproduces a maze exactly.
"""

import heapq
import logging
import random
from collections import deque
from typing import Callable, NamedTuple

from maze.coordinates import ALL_DIRECTIONS, HORIZONTAL_DIRECTIONS, VERTICAL_DIRECTIONS, Direction

logger = logging.getLogger(__name__)


def _rng(rng):
    return rng if rng is not None else random.Random()


def _is_open(mask, coord):
    return mask is None or not mask.is_masked(coord)


def _open_neighbours(grid, coord, mask):
    """Grid-adjacent cells of `coord` that are not masked off"""
    return [n for n in grid.neighbours(coord) if _is_open(mask, n)]


def _pending_cells(grid, mask):
    """Single pass over unmasked cells, shared by region restarts"""
    return (cell for cell in grid.iter_cells() if _is_open(mask, cell))


def _neighbour_table(grid, mask):
    """Row-major indices of every cell's unmasked grid-adjacent cells, per cell"""
    return [[grid.coordinate_to_index(n) for n in _open_neighbours(grid, cell, mask)]
            for cell in grid.iter_cells()]


def unmasked_regions(grid, mask=None):
    """
    Split the unmasked cells into regions connected by grid adjacency.

    Returns:
        list of regions, each a list of Coordinate in flood-fill order.
        Regions are ordered by their first row-major cell.
    """
    seen = [False] * grid.size
    regions = []
    for cell in _pending_cells(grid, mask):
        index = grid.coordinate_to_index(cell)
        if seen[index]:
            continue
        seen[index] = True
        region = [cell]
        queue = deque([cell])
        while queue:
            current = queue.popleft()
            for n in _open_neighbours(grid, current, mask):
                n_index = grid.coordinate_to_index(n)
                if not seen[n_index]:
                    seen[n_index] = True
                    region.append(n)
                    queue.append(n)
        regions.append(region)
    return regions


# ========== GENERATOR: BINARY TREE ==========

def binary_tree(grid, rng=None):
    """
    Binary Tree algorithm.

    One vertical and one horizontal direction are picked once for the whole
    run; every cell then links to one of its neighbours in those two
    directions. Re-picking per cell would leave unreachable pockets.
    """
    rng = _rng(rng)
    directions = (rng.choice(VERTICAL_DIRECTIONS), rng.choice(HORIZONTAL_DIRECTIONS))

    for cell in grid.iter_cells():
        neighbours = [n for n in grid.neighbours_at_directions(cell, directions) if n is not None]
        if neighbours:
            grid.link(cell, rng.choice(neighbours))


# ========== GENERATOR: SIDEWINDER ==========

def sidewinder(grid, rng=None, run_direction=None, close_direction=None):
    """
    Sidewinder algorithm.

    Cells are visited batch by batch (rows for a horizontal run direction,
    columns for a vertical one) in the sense of the run direction. Each cell
    joins the current run; a coin flip then either extends the run to the
    next cell or closes it out by linking one random run member towards
    `close_direction`. Closing out is forced at the end of a batch, and never
    happens in the boundary batch that has nothing beyond it.

    Args:
        grid: Grid to carve
        rng: random.Random
        run_direction: Direction runs grow in, random if None
        close_direction: Direction runs close out in, perpendicular to
            run_direction, random if None
    """
    rng = _rng(rng)
    if run_direction is None:
        if close_direction is None:
            run_direction = rng.choice(ALL_DIRECTIONS)
        else:
            run_direction = rng.choice(close_direction.perpendiculars())
    if close_direction is None:
        close_direction = rng.choice(run_direction.perpendiculars())
    if close_direction not in run_direction.perpendiculars():
        raise ValueError(f"Close out direction {close_direction} is not perpendicular to {run_direction}")

    batches = grid.iter_columns() if run_direction.is_vertical else grid.iter_rows()
    reverse = run_direction in (Direction.NORTH, Direction.WEST)

    for batch in batches:
        if reverse:
            batch.reverse()
        run = []
        for cell in batch:
            run.append(cell)
            next_cell = grid.neighbour_at_direction(cell, run_direction)
            at_run_end = next_cell is None
            at_close_boundary = grid.neighbour_at_direction(cell, close_direction) is None
            extend_run = (not at_run_end) and (at_close_boundary or rng.choice([True, False]))

            if extend_run:
                grid.link(cell, next_cell)
            else:
                if not at_close_boundary:
                    member = rng.choice(run)
                    grid.link(member, grid.neighbour_at_direction(member, close_direction))
                run = []


# ========== GENERATOR: ALDOUS-BRODER ==========

def aldous_broder(grid, rng=None, mask=None):
    """
    Aldous-Broder algorithm.

    Random walk over unmasked cells, linking every first visit to the cell
    it was reached from. Unbiased, but the walk has to cover every cell so
    it slows down sharply on large grids. Each disconnected region of the
    mask gets its own walk.
    """
    rng = _rng(rng)
    table = _neighbour_table(grid, mask)
    visited = [False] * grid.size

    for region in unmasked_regions(grid, mask):
        current = grid.coordinate_to_index(rng.choice(region))
        visited[current] = True
        remaining = len(region) - 1

        while remaining > 0:
            neighbour = rng.choice(table[current])
            if not visited[neighbour]:
                grid.link(grid.index_to_coordinate(current), grid.index_to_coordinate(neighbour))
                visited[neighbour] = True
                remaining -= 1
            current = neighbour


# ========== GENERATOR: WILSON ==========

def wilson(grid, rng=None, mask=None):
    """
    Wilson's algorithm.

    Loop-erased random walks from random cells outside the maze until they
    hit it; each surviving walk is carved in and joins the maze. Produces
    the same uniform spanning trees as Aldous-Broder.
    """
    rng = _rng(rng)
    table = _neighbour_table(grid, mask)
    in_maze = [False] * grid.size

    for region in unmasked_regions(grid, mask):
        first = rng.choice(region)
        in_maze[grid.coordinate_to_index(first)] = True
        unvisited = [grid.coordinate_to_index(cell) for cell in region if cell != first]

        while unvisited:
            # Random pick with swap-remove; cells carved in meanwhile are skipped
            pick = rng.randrange(len(unvisited))
            start = unvisited[pick]
            unvisited[pick] = unvisited[-1]
            unvisited.pop()
            if in_maze[start]:
                continue

            path = [start]
            path_index = {start: 0}
            current = start
            while not in_maze[current]:
                nxt = rng.choice(table[current])
                if nxt in path_index:
                    loop_i = path_index[nxt]
                    for index in path[loop_i + 1:]:
                        del path_index[index]
                    del path[loop_i + 1:]
                else:
                    path.append(nxt)
                    path_index[nxt] = len(path) - 1
                current = nxt

            for a, b in zip(path, path[1:]):
                grid.link(grid.index_to_coordinate(a), grid.index_to_coordinate(b))
            for index in path:
                in_maze[index] = True


# ========== GENERATOR: HUNT AND KILL ==========

def _visit(grid, cell, visited, border, mask):
    """Mark a cell visited and queue its unvisited neighbours for hunting"""
    visited[grid.coordinate_to_index(cell)] = True
    for n in _open_neighbours(grid, cell, mask):
        n_index = grid.coordinate_to_index(n)
        if not visited[n_index]:
            heapq.heappush(border, n_index)


def _hunt(grid, visited, border, rng):
    """
    Find the first row-major unvisited cell next to a visited one and link
    it to a random visited neighbour.

    `border` is a heap of row-major indices of cells that had a visited
    neighbour when pushed; stale (since visited) entries are dropped.

    Returns:
        The cell found, or None
    """
    while border:
        index = heapq.heappop(border)
        if visited[index]:
            continue
        cell = grid.index_to_coordinate(index)
        visited_neighbours = [n for n in grid.neighbours(cell)
                              if visited[grid.coordinate_to_index(n)]]
        grid.link(cell, rng.choice(visited_neighbours))
        return cell
    return None


def _skip_done(cursor, visited, open_cells):
    """First row-major index from `cursor` that is unmasked and unvisited"""
    while cursor < len(visited) and (visited[cursor] or not open_cells[cursor]):
        cursor += 1
    return cursor


def hunt_and_kill(grid, rng=None, mask=None):
    """
    Hunt-and-Kill algorithm.

    Walk to random unvisited neighbours until stuck, then hunt for a fresh
    cell bordering the visited area and carry on from there. When the hunt
    comes back empty but unmasked cells remain, they sit in another region
    and a new walk starts in it.

    The hunt picks the same cell a row-major scan would, but keeps the
    cells bordering the visited area in a heap instead of rescanning the
    grid, so large grids stay fast.
    """
    rng = _rng(rng)
    visited = [False] * grid.size
    open_cells = [_is_open(mask, cell) for cell in grid.iter_cells()]
    border = []
    cursor = 0

    current = grid.random_cell(rng, mask)
    if current is None:
        return
    _visit(grid, current, visited, border, mask)

    while current is not None:
        unvisited_neighbours = [n for n in _open_neighbours(grid, current, mask)
                                if not visited[grid.coordinate_to_index(n)]]
        if unvisited_neighbours:
            nxt = rng.choice(unvisited_neighbours)
            grid.link(current, nxt)
            _visit(grid, nxt, visited, border, mask)
            current = nxt
            continue

        current = _hunt(grid, visited, border, rng)
        if current is None:
            cursor = _skip_done(cursor, visited, open_cells)
            if cursor < grid.size:
                # Nothing borders the visited area: the rest is another region
                current = grid.index_to_coordinate(cursor)
                logger.debug("Hunt-and-kill restarting in a new region at %s", current)
        if current is not None:
            _visit(grid, current, visited, border, mask)


# ========== GENERATOR: RECURSIVE BACKTRACKER ==========

def recursive_backtracker(grid, rng=None, mask=None):
    """
    Depth-first search with backtracking, on an explicit stack so large grids
    do not hit the interpreter's recursion limit.
    """
    rng = _rng(rng)
    visited = [False] * grid.size
    pending = _pending_cells(grid, mask)

    start = grid.random_cell(rng, mask)
    if start is None:
        return
    visited[grid.coordinate_to_index(start)] = True
    stack = [start]

    while stack:
        current = stack[-1]
        neighbours = [n for n in _open_neighbours(grid, current, mask)
                      if not visited[grid.coordinate_to_index(n)]]

        if neighbours:
            nxt = rng.choice(neighbours)
            grid.link(current, nxt)
            visited[grid.coordinate_to_index(nxt)] = True
            stack.append(nxt)
        else:
            stack.pop()
            if not stack:
                restart = next((c for c in pending if not visited[grid.coordinate_to_index(c)]), None)
                if restart is not None:
                    logger.debug("Backtracker restarting in a new region at %s", restart)
                    visited[grid.coordinate_to_index(restart)] = True
                    stack.append(restart)


# ========== POST-PROCESSING ==========

def rebuild_random_walls(grid, count, rng=None, mask=None):
    """
    Block `count` random passages, relinking both cells of each one to some
    other unmasked neighbour.

    This loosens the maze for variety. It does not preserve the spanning
    tree: cycles can appear and regions can be cut off.

    Returns:
        int: number of passages blocked
    """
    rng = _rng(rng)
    blocked = 0
    for _ in range(count):
        if grid.links_count == 0:
            break
        a, b = grid.edge_at(rng.randrange(grid.links_count))
        grid.unlink(a, b)
        blocked += 1

        for cell, removed in ((a, b), (b, a)):
            candidates = [n for n in _open_neighbours(grid, cell, mask)
                          if n != removed and not grid.is_linked(cell, n)]
            if candidates:
                grid.link(cell, rng.choice(candidates))

    logger.debug("Rebuilt %d random walls", blocked)
    return blocked


# ========== ALGORITHM LIST ==========

class Algorithm(NamedTuple):
    name: str
    title: str
    apply: Callable
    uses_mask: bool


GEN_ALGOS = [
    Algorithm("binary", "Binary Tree", binary_tree, False),
    Algorithm("sidewinder", "Sidewinder", sidewinder, False),
    Algorithm("aldous-broder", "Aldous-Broder", aldous_broder, True),
    Algorithm("wilson", "Wilson", wilson, True),
    Algorithm("hunt-kill", "Hunt-and-Kill", hunt_and_kill, True),
    Algorithm("recursive-backtracker", "Recursive Backtracker", recursive_backtracker, True),
]


def generator_by_name(name):
    for algorithm in GEN_ALGOS:
        if algorithm.name == name:
            return algorithm
    raise KeyError(f"Unknown maze generator: {name!r}")


def generate(grid, name, rng=None, mask=None):
    """
    Run the named generator on the grid.

    Binary tree and sidewinder walk the whole grid and cannot honour a mask;
    passing one to them is logged and ignored.
    """
    algorithm = generator_by_name(name)
    logger.debug("Generating %s maze on %dx%d grid", algorithm.title, grid.row_length, grid.column_length)
    if algorithm.uses_mask:
        algorithm.apply(grid, rng, mask=mask)
    else:
        if mask is not None:
            logger.warning("%s ignores the mask", algorithm.title)
        algorithm.apply(grid, rng)
    logger.debug("%s maze done with %d passages", algorithm.title, grid.links_count)
