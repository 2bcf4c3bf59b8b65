"""
Image Renderer Module - block map based drawing of mazes with pygame
"""

from .blockmap import grid_to_blockmap, grid_to_walls, walls_to_blockmap
from .image_renderer import RenderOptions, render_grid, render_surface

__all__ = ['RenderOptions', 'render_grid', 'render_surface',
           'grid_to_blockmap', 'grid_to_walls', 'walls_to_blockmap']
