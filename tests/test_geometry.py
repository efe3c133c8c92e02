"""Tests for shapegen._geometry — radius, placement and vertex rings."""

import math
import random

import pytest

from shapegen._geometry import (
    flatten,
    random_center,
    regular_polygon,
    shape_radius,
    star_polygon,
)


def _dist(p, center=(0.0, 0.0)):
    return math.hypot(p[0] - center[0], p[1] - center[1])


# ── shape_radius ─────────────────────────────────────────────────────────────


class TestShapeRadius:
    def test_half_of_scaled_mean(self):
        assert shape_radius(0.2, 200.0) == 20

    def test_truncates(self):
        assert shape_radius(0.25, 101.0) == 12

    def test_zero_ratio(self):
        assert shape_radius(0.0, 500.0) == 0


# ── random_center ────────────────────────────────────────────────────────────


class TestRandomCenter:
    def test_within_extended_bounds(self):
        rng = random.Random(0)
        for _ in range(500):
            x, y = random_center(100, 50, 10, rng)
            assert -10 <= x <= 110
            assert -10 <= y <= 60

    def test_reaches_outside_canvas(self):
        rng = random.Random(1)
        xs = [random_center(20, 20, 10, rng)[0] for _ in range(500)]
        assert min(xs) < 0
        assert max(xs) > 20

    def test_integer_coordinates(self):
        x, y = random_center(10, 10, 3, random.Random(2))
        assert isinstance(x, int) and isinstance(y, int)


# ── regular_polygon ──────────────────────────────────────────────────────────


class TestRegularPolygon:
    def test_square_vertices(self):
        pts = regular_polygon((0, 0), 10, 4, 0)
        expected = [(10, 0), (0, 10), (-10, 0), (0, -10)]
        for p, e in zip(pts, expected):
            assert p == pytest.approx(e, abs=1e-9)

    def test_rotation_turns_ring(self):
        pts = regular_polygon((0, 0), 10, 4, 90)
        assert pts[0] == pytest.approx((0, 10), abs=1e-9)
        assert pts[1] == pytest.approx((-10, 0), abs=1e-9)

    def test_offset_center(self):
        pts = regular_polygon((50, 20), 5, 3, 0)
        assert pts[0] == pytest.approx((55, 20))
        assert all(_dist(p, (50, 20)) == pytest.approx(5) for p in pts)

    @pytest.mark.parametrize("sides", range(3, 13))
    def test_vertex_count(self, sides):
        assert len(regular_polygon((0, 0), 1, sides, 0)) == sides


# ── star_polygon ─────────────────────────────────────────────────────────────


class TestStarPolygon:
    def test_alternating_distances(self):
        pts = star_polygon((0, 0), 10, 4, 0)
        assert len(pts) == 8
        for i, p in enumerate(pts):
            expected = 10 if i % 2 == 0 else 5
            assert _dist(p) == pytest.approx(expected)

    def test_first_tip_on_rotation(self):
        pts = star_polygon((0, 0), 10, 5, 0)
        assert pts[0] == pytest.approx((10, 0))
        # notch sits halfway between the first two tips
        angle = math.degrees(math.atan2(pts[1][1], pts[1][0]))
        assert angle == pytest.approx(36)


# ── flatten ──────────────────────────────────────────────────────────────────


class TestFlatten:
    def test_interleaves(self):
        assert flatten([(1, 2), (3, 4), (5, 6)]) == [1, 2, 3, 4, 5, 6]

    def test_empty(self):
        assert flatten([]) == []
