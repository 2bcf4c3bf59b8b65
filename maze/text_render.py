"""
Text rendering of a grid with box drawing characters

Each cell is drawn as its 3 glyph body plus its east wall, and the line
below it holds its south wall and south-east corner. The north boundary and
the west boundary are drawn once per grid and per row.
"""

from maze.coordinates import Direction
from maze.displays import GridDisplay
from utils.constants import (
    EMPTY_CELL_BODY, WALL_D, WALL_L, WALL_LD, WALL_LR, WALL_LR_3, WALL_LRD, WALL_LRU,
    WALL_LRUD, WALL_LU, WALL_LUD, WALL_R, WALL_RD, WALL_RU, WALL_RUD, WALL_U, WALL_UD
)

# (left, right, up, down) wall sections meeting at a corner -> glyph
CORNERS = {
    (True, True, True, True): WALL_LRUD,
    (True, True, True, False): WALL_LRU,
    (True, True, False, True): WALL_LRD,
    (True, False, True, True): WALL_LUD,
    (False, True, True, True): WALL_RUD,
    (True, True, False, False): WALL_LR,
    (False, False, True, True): WALL_UD,
    (False, True, True, False): WALL_RU,
    (True, False, False, True): WALL_LD,
    (True, False, True, False): WALL_LU,
    (False, True, False, True): WALL_RD,
    (True, False, False, False): WALL_L,
    (False, True, False, False): WALL_R,
    (False, False, True, False): WALL_U,
    (False, False, False, True): WALL_D,
    (False, False, False, False): " ",
}


def _inner_corner(grid, cell, east_open, south_open):
    """Glyph for the south-east corner of a cell that is not on the grid's edge"""
    east = grid.neighbour_at_direction(cell, Direction.EAST)
    south = grid.neighbour_at_direction(cell, Direction.SOUTH)
    access_from_east = grid.is_neighbour_linked(east, Direction.SOUTH)
    access_from_south = grid.is_neighbour_linked(south, Direction.EAST)
    sections = (not south_open, not access_from_east, not east_open, not access_from_south)
    return CORNERS[sections]


def render_text(grid, display=None):
    """
    Render the grid as text.

    Args:
        grid: Grid to draw
        display: GridDisplay choosing each cell's body, blank if None

    Returns:
        str: the maze, newline terminated
    """
    if grid.size == 0:
        return ""
    display = display or GridDisplay()
    last_column = grid.columns - 1
    last_row = grid.rows - 1

    # North boundary
    output = [WALL_RD]
    for index, cell in enumerate(next(iter(grid.iter_rows()))):
        output.append(WALL_LR_3)
        if grid.is_neighbour_linked(cell, Direction.EAST):
            output.append(WALL_LR)
        else:
            output.append(WALL_LD if index == last_column else WALL_LRD)
    output.append("\n")

    for row_index, row in enumerate(grid.iter_rows()):
        is_last_row = row_index == last_row
        middle = [WALL_UD]
        bottom = []

        for column_index, cell in enumerate(row):
            is_last_column = column_index == last_column
            east_open = grid.is_neighbour_linked(cell, Direction.EAST)
            south_open = grid.is_neighbour_linked(cell, Direction.SOUTH)

            body = display.render_cell_body(cell) or EMPTY_CELL_BODY
            middle.append(body)
            middle.append(" " if east_open else WALL_UD)

            if column_index == 0:
                if is_last_row:
                    bottom.append(WALL_RU)
                else:
                    bottom.append(WALL_UD if south_open else WALL_RUD)
            bottom.append("   " if south_open else WALL_LR_3)

            if is_last_row and is_last_column:
                corner = WALL_LU
            elif is_last_row:
                corner = WALL_LR if east_open else WALL_LRU
            elif is_last_column:
                corner = WALL_UD if south_open else WALL_LUD
            else:
                corner = _inner_corner(grid, cell, east_open, south_open)
            bottom.append(corner)

        output.extend(middle)
        output.append("\n")
        output.extend(bottom)
        output.append("\n")

    return "".join(output)
