"""
Binary masks - switch grid cells off for generation and pathing
"""

import numpy as np
import pygame

from maze.coordinates import Coordinate
from utils.constants import MASK_CHAR, MASK_LUMINANCE_THRESHOLD


class BinaryMask2D:
    """
    Read-only per-cell on/off mask over 2D space.

    A True entry means the cell at that position is masked off. Positions
    outside the mask's own width and height are never masked.
    """

    def __init__(self, masked):
        """
        Args:
            masked: 2D boolean array-like indexed [y, x]
        """
        masked = np.array(masked, dtype=bool)
        if masked.ndim != 2:
            raise ValueError(f"Mask data must be 2D, got shape {masked.shape}")
        self._masked = masked
        self._masked.setflags(write=False)
        self.height, self.width = masked.shape

    def __repr__(self):
        return f"BinaryMask2D({self.width}x{self.height}, masked={int(self._masked.sum())})"

    @classmethod
    def from_image(cls, path):
        """
        Load a mask from an image file. Dark pixels (luminance below 128)
        are masked off, one pixel per grid cell.

        Raises:
            pygame.error: the file cannot be read as an image
        """
        surface = pygame.image.load(str(path))
        rgb = pygame.surfarray.array3d(surface).astype(np.float32)  # [x, y, channel]
        luminance = rgb[..., 0] * 0.299 + rgb[..., 1] * 0.587 + rgb[..., 2] * 0.114
        return cls((luminance < MASK_LUMINANCE_THRESHOLD).T)

    @classmethod
    def from_text(cls, rows, masked_char=MASK_CHAR):
        """
        Build a mask from equal length text rows, e.g. ["..X", "X.."].
        Cells holding `masked_char` are masked off.
        """
        rows = list(rows)
        if len({len(r) for r in rows}) > 1:
            raise ValueError("Mask text rows must all have the same length")
        return cls([[ch == masked_char for ch in row] for row in rows])

    @property
    def data(self):
        return self._masked

    def is_masked(self, coord):
        """Is the given coordinate masked out / turned off?"""
        x, y = coord
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self._masked[y, x])
        return False

    def count_unmasked_within_dimensions(self, width, height):
        """
        Number of unmasked cells in the `width` x `height` space anchored at
        (0, 0). Cells outside the mask count as unmasked.
        """
        overlap = self._masked[:max(0, height), :max(0, width)]
        return max(0, width) * max(0, height) - int(overlap.sum())

    def first_unmasked_coordinate(self):
        """First row-major unmasked coordinate inside the mask, or None"""
        unmasked = np.flatnonzero(~self._masked)
        if unmasked.size == 0:
            return None
        return Coordinate.from_row_major_index(int(unmasked[0]), self.width)
