"""Shared test fixtures for labyrinth."""

import pytest

from labyrinth.config import LabyrinthConfig
from labyrinth.board import MarkedBoxStore
from labyrinth.layout.grid import Grid
from labyrinth.state import LabyrinthState


@pytest.fixture
def grid():
    """5x5 boxes of 64px centred at (40, 40) on a 400x400 surface."""
    return Grid.create(64, 400, 400)


@pytest.fixture
def empty_grid():
    """Grid for a zero-area surface."""
    return Grid.create(64, 0, 0)


@pytest.fixture
def store(grid):
    return MarkedBoxStore(grid)


@pytest.fixture
def state():
    """State with a 400x400 surface already allocated."""
    s = LabyrinthState(LabyrinthConfig())
    s.on_resize((0, 0, 400, 400))
    return s
