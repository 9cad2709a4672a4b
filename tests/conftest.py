"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from knight_path.benchmark import distance_matrix
from knight_path.board import BoardGraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def board() -> BoardGraph:
    """Standard 8x8 knight graph, built once per session."""
    return BoardGraph(8)


@pytest.fixture(scope="session")
def distances(board):
    """Reference all-pairs knight distances for the 8x8 board."""
    return distance_matrix(board)


@pytest.fixture
def small_board() -> BoardGraph:
    """3x3 board whose centre square has no knight moves."""
    return BoardGraph(3)


@pytest.fixture
def corner_squares() -> list[tuple[int, int]]:
    """Return the four corners of the 8x8 board."""
    return [(0, 0), (0, 7), (7, 0), (7, 7)]


@pytest.fixture
def sample_problems() -> list[tuple[tuple[int, int], tuple[int, int], int]]:
    """Return (start, goal, known distance) triples for the 8x8 board."""
    return [
        ((0, 0), (1, 2), 1),
        ((0, 0), (3, 3), 2),
        ((3, 3), (0, 0), 2),
        ((0, 0), (7, 7), 6),
        ((0, 0), (0, 1), 3),
        ((0, 0), (1, 1), 4),
    ]
