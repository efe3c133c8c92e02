"""Tests for shapegen.config — sampling range dataclasses."""

import pytest

from shapegen.config import (
    CircleRange,
    ColorRange,
    PolygonRange,
    ShapeRange,
    StarRange,
    hundredths,
    make_shape_range,
)
from shapegen.errors import InvalidParameterError


class TestHundredths:
    def test_exact(self):
        assert hundredths(0.25) == 25

    def test_float_noise_is_rounded(self):
        # 0.29 * 100 == 28.999999999999996
        assert hundredths(0.29) == 29

    def test_half_hundredth(self):
        assert hundredths(0.125) == 12


class TestColorRange:
    def test_defaults(self):
        cfg = ColorRange()
        assert (cfg.min_red, cfg.max_red) == (0, 255)
        assert (cfg.min_green, cfg.max_green) == (0, 255)
        assert (cfg.min_blue, cfg.max_blue) == (0, 255)
        assert (cfg.min_alpha, cfg.max_alpha) == (0.6, 0.8)

    def test_equal_bounds_allowed(self):
        cfg = ColorRange(min_red=7, max_red=7, min_alpha=0.5, max_alpha=0.5)
        assert cfg.min_red == cfg.max_red == 7

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_red": -1},
            {"max_green": 256},
            {"min_blue": 10, "max_blue": 5},
            {"min_alpha": -0.1},
            {"max_alpha": 1.5},
            {"min_alpha": 0.9, "max_alpha": 0.8},
            {"min_red": 1.5},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameterError):
            ColorRange(**kwargs)


class TestShapeRanges:
    def test_circle_defaults(self):
        cfg = CircleRange()
        assert (cfg.min_ratio, cfg.max_ratio) == (0.125, 0.25)

    def test_polygon_defaults(self):
        cfg = PolygonRange()
        assert (cfg.min_sides, cfg.max_sides) == (3, 12)
        assert (cfg.min_rotation, cfg.max_rotation) == (0, 360)

    def test_star_defaults(self):
        cfg = StarRange()
        assert (cfg.min_points, cfg.max_points) == (4, 8)

    @pytest.mark.parametrize(
        "factory, kwargs",
        [
            (CircleRange, {"max_ratio": 1.01}),
            (CircleRange, {"min_ratio": 0.5, "max_ratio": 0.4}),
            (PolygonRange, {"min_sides": 2}),
            (PolygonRange, {"max_sides": 13}),
            (PolygonRange, {"max_rotation": 361}),
            (StarRange, {"min_points": 3}),
            (StarRange, {"min_points": 8, "max_points": 4}),
            (StarRange, {"min_rotation": -1}),
        ],
    )
    def test_invalid(self, factory, kwargs):
        with pytest.raises(InvalidParameterError):
            factory(**kwargs)

    def test_shape_range_defaults_are_independent(self):
        a, b = ShapeRange(), ShapeRange()
        assert a.circle == CircleRange()
        assert a.circle is not b.circle


class TestMakeShapeRange:
    def test_shared_ratio(self):
        cfg = make_shape_range(0.3, 0.4)
        for sub in (cfg.circle, cfg.polygon, cfg.star):
            assert (sub.min_ratio, sub.max_ratio) == (0.3, 0.4)
        assert cfg.polygon.max_sides == 12

    def test_invalid_ratio(self):
        with pytest.raises(InvalidParameterError):
            make_shape_range(0.5, 0.1)
