"""
Shared fixtures for the mazes test suite.
"""

import os
import random

# Headless pygame: must be set before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from maze.grid import Grid  # noqa: E402
from maze.masks import BinaryMask2D  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random source so every generated maze is reproducible."""
    return random.Random(1234)


@pytest.fixture
def grid_2x2():
    """2x2 maze: (0,0)-(1,0), (0,0)-(0,1), (0,1)-(1,1)."""
    grid = Grid(2, 2)
    grid.link((0, 0), (1, 0))
    grid.link((0, 0), (0, 1))
    grid.link((0, 1), (1, 1))
    return grid


@pytest.fixture
def split_mask():
    """5x5 mask whose masked middle column splits the grid into two regions."""
    return BinaryMask2D.from_text([
        "..X..",
        "..X..",
        "..X..",
        "..X..",
        "..X..",
    ])
