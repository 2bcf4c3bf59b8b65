"""
Color palette for the maze image renderer
"""

# Background colors
COLOR_BG = (255, 255, 255)        # Cell background
COLOR_MASKED = (40, 42, 48)       # Masked off cells

# Walls
COLOR_WALL = (0, 0, 0)

# Distance shading (near -> far)
COLOR_DISTANCE_NEAR = (255, 255, 255)
COLOR_DISTANCE_FAR = (40, 90, 200)

# Path and markers
COLOR_PATH = (230, 60, 60)
COLOR_START = (60, 200, 120)      # Start marker
COLOR_END = (255, 200, 40)        # End marker
COLOR_TEXT = (10, 10, 10)
