"""
Global constants for the mazes package
"""

# Wall bit flags (for wall bitmask views of a grid)
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Neighbour slots per cell in the grid adjacency table
NEIGHBOUR_SLOTS = 4

# Text rendering
CELL_BODY_WIDTH = 3
EMPTY_CELL_BODY = "   "
PATH_CELL_BODY = " . "
START_CELL_BODY = " S "
END_CELL_BODY = " E "

WALL_L = "╴"
WALL_R = "╶"
WALL_U = "╵"
WALL_D = "╷"
WALL_LR_3 = "───"
WALL_LR = "─"
WALL_UD = "│"
WALL_LD = "┐"
WALL_RU = "└"
WALL_LU = "┘"
WALL_RD = "┌"
WALL_LRU = "┴"
WALL_LRD = "┬"
WALL_LRUD = "┼"
WALL_RUD = "├"
WALL_LUD = "┤"

# Masks: pixels darker than this are masked off
MASK_LUMINANCE_THRESHOLD = 128
MASK_CHAR = "X"

# Command line defaults
DEFAULT_GRID_SIZE = 20
DEFAULT_CELL_PIXELS = 10
MAX_CELL_PIXELS = 255
TEXT_RENDER_MAX_GRID_SIZE = 25  # larger grids default to image output

# Screen view
WINDOW_TITLE = "Mazes"
FPS = 30
