"""Tests for placement policies and clamping."""

import pytest

from snaptile.models import Point, Rect, Size
from snaptile.utils import RandomPlacement, clamp_position, fixed_placement


class TestRandomPlacement:
    """Tests for seeded random placement."""

    @pytest.mark.parametrize("seed", range(5))
    def test_fits_viewport(self, seed):
        place = RandomPlacement(seed=seed, bottom_margin=50)
        for _ in range(50):
            point = place(Size(1200, 800), Size(300, 200))
            assert 0 <= point.x < 900
            assert 0 <= point.y < 550
            assert point.x == int(point.x)

    def test_oversized_window_pinned(self):
        place = RandomPlacement(seed=0)
        assert place(Size(200, 100), Size(300, 200)) == Point(0, 0)

    def test_same_seed_same_positions(self):
        first = RandomPlacement(seed=11)
        second = RandomPlacement(seed=11)
        assert first(Size(1200, 800), Size(300, 200)) == second(Size(1200, 800), Size(300, 200))

    def test_fixed_placement(self):
        place = fixed_placement(Point(7, 8))
        assert place(Size(1200, 800), Size(300, 200)) == Point(7, 8)


class TestClampPosition:
    """Tests for clamping a window into bounds."""

    @pytest.mark.parametrize("candidate,expected", [
        (Point(100, 100), Point(100, 100)),
        (Point(-50, 10), Point(0, 10)),
        (Point(5000, 5000), Point(900, 600)),
        (Point(950, -3), Point(900, 0)),
    ])
    def test_viewport_bounds(self, candidate, expected):
        bounds = Rect(0, 0, 1200, 800)
        assert clamp_position(candidate, Size(300, 200), bounds) == expected

    def test_offset_bounds(self):
        bounds = Rect(600, 0, 600, 800)
        assert clamp_position(Point(0, 0), Size(300, 200), bounds) == Point(600, 0)
        assert clamp_position(Point(2000, 0), Size(300, 200), bounds) == Point(900, 0)

    def test_window_larger_than_bounds(self):
        bounds = Rect(1000, 0, 1000, 800)
        assert clamp_position(Point(400, 300), Size(500, 800), bounds) == Point(1000, 0)
        assert clamp_position(Point(1800, 300), Size(1500, 900), bounds) == Point(1000, 0)
