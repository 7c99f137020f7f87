"""Pytest configuration and shared fixtures."""

import random

import numpy as np
import pytest

from cellextension.board.board_state import BoardState
from cellextension.config import GameSettings, ScoringMechanism
from cellextension.game.session import GameSession


@pytest.fixture(scope="session")
def set_random_seeds():
    """Set random seeds for reproducible tests."""
    np.random.seed(42)
    random.seed(42)
    yield


@pytest.fixture
def rng():
    """Seeded random source for AI tie-breaking."""
    return random.Random(42)


@pytest.fixture
def empty_board():
    """Small empty board for fast testing."""
    return BoardState.empty(4, 4)


@pytest.fixture
def settings():
    """Default 4x4 settings against the easy AI."""
    return GameSettings(board_size=4)


@pytest.fixture
def session(settings):
    """Fresh session on a 4x4 board."""
    return GameSession(settings)


@pytest.fixture
def make_session():
    """Factory for sessions with custom settings."""
    def _make(board_size=4, scoring_mechanism=ScoringMechanism.MULTIPLICATION, **kwargs):
        return GameSession(GameSettings(
            board_size=board_size, scoring_mechanism=scoring_mechanism, **kwargs
        ))

    return _make


@pytest.fixture
def blocking_board():
    """6x1 board where the opponent (player 0) threatens to merge into a size-4 group.

    Layout: O O . O X .  (player 1 to move, cells 2 and 5 free)
    """
    return BoardState.from_cells(6, 1, cells0=[(0, 0), (1, 0), (3, 0)], cells1=[(4, 0)])


def random_board(width, height, fill, seed):
    """Board with roughly fill fraction of cells split between both players."""
    gen = random.Random(seed)
    cells0, cells1 = [], []
    for y in range(height):
        for x in range(width):
            roll = gen.random()
            if roll < fill / 2:
                cells0.append((x, y))
            elif roll < fill:
                cells1.append((x, y))
    return BoardState.from_cells(width, height, cells0, cells1)


@pytest.fixture
def random_boards():
    """A handful of reproducible random boards of different shapes."""
    return [
        random_board(w, h, fill, seed)
        for seed, (w, h, fill) in enumerate([
            (4, 4, 0.5), (6, 6, 0.7), (5, 3, 0.9), (8, 8, 0.4), (10, 10, 0.6),
        ])
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
    config.addinivalue_line("markers", "performance: Performance test")
    config.addinivalue_line("markers", "slow: Slow test")
    config.addinivalue_line("markers", "minimax: Exercises the minimax search")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add automatic markers."""
    for item in items:
        # Add markers based on file path
        if "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)
            item.add_marker(pytest.mark.slow)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "minimax" in item.name.lower():
            item.add_marker(pytest.mark.minimax)
