"""Sampling ranges for the random color and shape factories.

Every range is inclusive on both ends. Float ranges are sampled in steps of
one hundredth, so bounds are compared after rounding to hundredths.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapegen._validation import require_float, require_int
from shapegen.errors import InvalidParameterError


def hundredths(value: float) -> int:
    """Return *value* as a whole number of hundredths (0.25 -> 25)."""
    return round(value * 100)


def _int_bounds(name: str, lo: int, hi: int, low: int, high: int) -> None:
    require_int(lo, low, high, f"minimum {name}")
    require_int(hi, low, high, f"maximum {name}")
    if lo > hi:
        raise InvalidParameterError(
            f"The minimum {name} ({lo}) must not exceed the maximum {name} ({hi})."
        )


def _float_bounds(name: str, lo: float, hi: float, low: float, high: float) -> None:
    require_float(lo, low, high, f"minimum {name}")
    require_float(hi, low, high, f"maximum {name}")
    if hundredths(lo) > hundredths(hi):
        raise InvalidParameterError(
            f"The minimum {name} ({lo}) must not exceed the maximum {name} ({hi})."
        )


@dataclass
class ColorRange:
    min_red: int = 0
    max_red: int = 255
    min_green: int = 0
    max_green: int = 255
    min_blue: int = 0
    max_blue: int = 255

    # 0.0 = fully transparent, 1.0 = fully opaque
    min_alpha: float = 0.6
    max_alpha: float = 0.8

    def __post_init__(self) -> None:
        _int_bounds("red", self.min_red, self.max_red, 0, 255)
        _int_bounds("green", self.min_green, self.max_green, 0, 255)
        _int_bounds("blue", self.min_blue, self.max_blue, 0, 255)
        _float_bounds("alpha", self.min_alpha, self.max_alpha, 0.0, 1.0)


@dataclass
class CircleRange:
    # Fraction of the canvas geometric mean
    min_ratio: float = 0.125
    max_ratio: float = 0.25

    def __post_init__(self) -> None:
        _float_bounds("ratio", self.min_ratio, self.max_ratio, 0.0, 1.0)


@dataclass
class PolygonRange:
    min_ratio: float = 0.125
    max_ratio: float = 0.25
    min_sides: int = 3
    max_sides: int = 12
    min_rotation: int = 0  # degrees
    max_rotation: int = 360

    def __post_init__(self) -> None:
        _float_bounds("ratio", self.min_ratio, self.max_ratio, 0.0, 1.0)
        _int_bounds("sides", self.min_sides, self.max_sides, 3, 12)
        _int_bounds("rotation", self.min_rotation, self.max_rotation, 0, 360)


@dataclass
class StarRange:
    min_ratio: float = 0.125
    max_ratio: float = 0.25
    min_points: int = 4
    max_points: int = 8
    min_rotation: int = 0  # degrees
    max_rotation: int = 360

    def __post_init__(self) -> None:
        _float_bounds("ratio", self.min_ratio, self.max_ratio, 0.0, 1.0)
        _int_bounds("points", self.min_points, self.max_points, 4, 8)
        _int_bounds("rotation", self.min_rotation, self.max_rotation, 0, 360)


@dataclass
class ShapeRange:
    """Per-variant ranges used by :func:`shapegen.shapes.random_shape`."""

    circle: CircleRange = field(default_factory=CircleRange)
    polygon: PolygonRange = field(default_factory=PolygonRange)
    star: StarRange = field(default_factory=StarRange)


def make_shape_range(min_ratio: float = 0.125, max_ratio: float = 0.25) -> ShapeRange:
    """Return a ShapeRange where every variant shares one size window.

    Sides, points and rotation keep their defaults.
    """
    return ShapeRange(
        circle=CircleRange(min_ratio=min_ratio, max_ratio=max_ratio),
        polygon=PolygonRange(min_ratio=min_ratio, max_ratio=max_ratio),
        star=StarRange(min_ratio=min_ratio, max_ratio=max_ratio),
    )
