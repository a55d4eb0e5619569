"""
Pip Stack - Test Configuration and Fixtures

Common board layouts used across test modules.
"""

import pytest

from src.engine.base import Color, Die, Position

RED = Color.RED
BLACK = Color.BLACK


def layout(*cells: tuple[int, int, Color, int]) -> dict[Position, Die]:
    """Build a board mapping from (x, y, color, value) tuples."""
    return {Position(x, y): Die(color, value) for x, y, color, value in cells}


# =============================================================================
# BOARD LAYOUTS
# =============================================================================

@pytest.fixture
def initial_layout() -> dict[Position, Die]:
    """The two seed dice every game starts with."""
    return layout((0, 0, RED, 1), (0, 1, BLACK, 1))


@pytest.fixture
def lane_layout() -> dict[Position, Die]:
    """
    A red 3 under a black wall five cells long.

    The wall braces an open lane (1,0)..(4,0) to the right of the red die.
    """
    return layout(
        (0, 0, RED, 3),
        (0, 1, BLACK, 1),
        (1, 1, BLACK, 1),
        (2, 1, BLACK, 1),
        (3, 1, BLACK, 1),
        (4, 1, BLACK, 1),
    )


@pytest.fixture
def overflow_layout() -> dict[Position, Die]:
    """Two adjacent red sixes; only (1,0) is free to merge."""
    return layout((0, 0, RED, 6), (1, 0, RED, 6), (0, 1, BLACK, 1))


@pytest.fixture
def blockade_layout() -> dict[Position, Die]:
    """
    A single black die pinned between red stacks.

    The black die is an articulation point and both of its empty neighbors
    touch a red stack, so black has no legal action on its turn.
    """
    return layout(
        (-1, 0, RED, 1),
        (0, 0, BLACK, 1),
        (1, 0, RED, 1),
        (1, 1, RED, 1),
        (1, -1, RED, 1),
    )


@pytest.fixture
def build_layout():
    """Factory for ad-hoc layouts from (x, y, color, value) tuples."""
    return layout
