"""
Tests for the slide stepper.
"""

import pytest

from src.engine.base import Position
from src.engine.slide import can_step, reachable, slide_steps


def cells(*coords: tuple[int, int]) -> frozenset[Position]:
    return frozenset(Position(x, y) for x, y in coords)


ORIGIN = Position(0, 0)


class TestDiagonalStep:
    """Diagonal steps need exactly one occupied shoulder."""

    def test_one_shoulder_occupied(self):
        assert can_step(cells((0, 1)), ORIGIN, 1, 1)
        assert can_step(cells((1, 0)), ORIGIN, 1, 1)

    def test_both_shoulders_occupied_blocks_gap(self):
        assert not can_step(cells((1, 0), (0, 1)), ORIGIN, 1, 1)

    def test_no_shoulder_occupied(self):
        assert not can_step(cells((-1, 0)), ORIGIN, 1, 1)

    def test_occupied_target(self):
        assert not can_step(cells((0, 1), (1, 1)), ORIGIN, 1, 1)


class TestOrthogonalStep:
    """Orthogonal steps need an occupied brace flanking the target."""

    @pytest.mark.parametrize("brace", [(1, 1), (1, -1)])
    def test_braced_horizontal_step(self, brace):
        assert can_step(cells(brace), ORIGIN, 1, 0)

    @pytest.mark.parametrize("brace", [(1, -1), (-1, -1)])
    def test_braced_vertical_step(self, brace):
        assert can_step(cells(brace), ORIGIN, 0, -1)

    def test_neighbor_beside_origin_is_not_a_brace(self):
        # Sliding right away from (0, 1) would lose contact with it
        assert not can_step(cells((0, 1)), ORIGIN, 1, 0)

    def test_occupied_target(self):
        assert not can_step(cells((1, 0), (1, 1)), ORIGIN, 1, 0)

    def test_zero_offset(self):
        assert not can_step(cells((1, 1)), ORIGIN, 0, 0)


class TestSlideSteps:
    """Tests for single-step expansion."""

    def test_seed_position(self):
        assert slide_steps(cells((0, 1)), ORIGIN) == {Position(1, 1), Position(-1, 1)}

    def test_isolated_die_cannot_move(self):
        assert slide_steps(frozenset(), ORIGIN) == set()

    def test_enclosed_die_cannot_move(self):
        ring = cells((1, 0), (-1, 0), (0, 1), (0, -1))
        assert slide_steps(ring, ORIGIN) == set()


class TestReachable:
    """Tests for exact-distance reachability along a braced lane."""

    @pytest.fixture
    def wall(self, lane_layout):
        return frozenset(lane_layout)

    def test_one_step(self, wall):
        assert reachable(wall, ORIGIN, 1) == {Position(1, 0), Position(-1, 1)}

    def test_two_steps_never_includes_origin(self, wall):
        assert reachable(wall, ORIGIN, 2) == {Position(2, 0), Position(0, 2)}

    def test_three_steps(self, wall):
        assert reachable(wall, ORIGIN, 3) == {
            Position(3, 0),
            Position(1, 0),
            Position(-1, 1),
            Position(1, 2),
        }

    def test_three_steps_stop_short_of_fourth_cell(self, wall):
        destinations = reachable(wall, ORIGIN, 3)
        assert Position(3, 0) in destinations
        assert Position(4, 0) not in destinations

    def test_origin_excluded_from_occupancy(self, wall):
        assert reachable(wall, ORIGIN, 2) == reachable(wall - {ORIGIN}, ORIGIN, 2)

    def test_isolated_die(self):
        assert reachable(frozenset({ORIGIN}), ORIGIN, 6) == set()
