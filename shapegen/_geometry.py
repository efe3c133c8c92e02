"""Pure geometry helpers for shape placement and vertex rings."""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

Point = tuple[float, float]


def shape_radius(ratio: float, geometric_mean: float) -> int:
    """Pixel radius of a shape whose diameter is *ratio* of the canvas scale."""
    return int(ratio * geometric_mean / 2)


def random_center(
    width: int, height: int, radius: int, rng: random.Random
) -> tuple[int, int]:
    """Pick a center anywhere a shape of *radius* still touches the canvas.

    The range extends *radius* past every edge, so shapes may be clipped.
    """
    x = rng.randint(-radius, width + radius)
    y = rng.randint(-radius, height + radius)
    return x, y


def _ring(center: Point, distances: np.ndarray, rotation: float) -> list[Point]:
    n = len(distances)
    angles = np.deg2rad(rotation + 360 / n * np.arange(n))
    xs = center[0] + distances * np.cos(angles)
    ys = center[1] + distances * np.sin(angles)
    return list(zip(xs.tolist(), ys.tolist()))


def regular_polygon(
    center: Point, radius: float, sides: int, rotation: float
) -> list[Point]:
    """Vertices of a regular polygon, in angular order starting at *rotation*."""
    return _ring(center, np.full(sides, float(radius)), rotation)


def star_polygon(
    center: Point, radius: float, points: int, rotation: float
) -> list[Point]:
    """Vertices of a star with *points* tips.

    The ring has ``2 * points`` vertices alternating between *radius* (tips,
    even indices) and ``radius / 2`` (notches, odd indices).
    """
    n = points * 2
    distances = np.where(np.arange(n) % 2 == 0, radius, radius / 2).astype(float)
    return _ring(center, distances, rotation)


def flatten(vertices: Sequence[Point]) -> list[float]:
    """[(x0, y0), (x1, y1), ...] -> [x0, y0, x1, y1, ...]"""
    return [c for xy in vertices for c in xy]
