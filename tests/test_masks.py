"""
Tests for binary masks.
"""

import numpy as np
import pygame
import pytest

from maze.coordinates import Coordinate
from maze.masks import BinaryMask2D


class TestBinaryMask2D:
    def test_from_text(self):
        mask = BinaryMask2D.from_text([".X.", "..X"])
        assert mask.width == 3
        assert mask.height == 2
        assert mask.is_masked((1, 0))
        assert mask.is_masked((2, 1))
        assert not mask.is_masked((0, 0))

    def test_outside_is_unmasked(self):
        mask = BinaryMask2D.from_text(["XX", "XX"])
        assert not mask.is_masked((2, 0))
        assert not mask.is_masked((0, 5))

    def test_ragged_text_rejected(self):
        with pytest.raises(ValueError):
            BinaryMask2D.from_text(["..", "..."])

    def test_non_2d_rejected(self):
        with pytest.raises(ValueError):
            BinaryMask2D([True, False])

    def test_data_is_read_only_copy(self):
        source = np.zeros((2, 2), dtype=bool)
        mask = BinaryMask2D(source)
        source[0, 0] = True
        assert not mask.is_masked((0, 0))
        with pytest.raises(ValueError):
            mask.data[0, 0] = True

    def test_count_unmasked_within_dimensions(self):
        mask = BinaryMask2D.from_text(["X.", ".X"])
        assert mask.count_unmasked_within_dimensions(2, 2) == 2
        assert mask.count_unmasked_within_dimensions(1, 1) == 0
        assert mask.count_unmasked_within_dimensions(3, 3) == 7

    def test_first_unmasked_coordinate(self):
        assert BinaryMask2D.from_text(["XX", "X."]).first_unmasked_coordinate() == Coordinate(1, 1)
        assert BinaryMask2D.from_text(["XX"]).first_unmasked_coordinate() is None

    def test_from_image(self, tmp_path):
        surface = pygame.Surface((3, 2))
        surface.fill((255, 255, 255))
        surface.set_at((1, 0), (0, 0, 0))
        surface.set_at((2, 1), (100, 100, 100))
        path = tmp_path / "mask.png"
        pygame.image.save(surface, str(path))

        mask = BinaryMask2D.from_image(path)
        assert (mask.width, mask.height) == (3, 2)
        assert mask.is_masked((1, 0))
        assert mask.is_masked((2, 1))
        assert not mask.is_masked((0, 0))

    def test_from_image_missing_file(self, tmp_path):
        with pytest.raises((pygame.error, FileNotFoundError)):
            BinaryMask2D.from_image(tmp_path / "missing.png")
