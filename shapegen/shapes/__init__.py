"""Drawable shapes and the random shape factory.

>>> from shapegen.shapes import Circle, Polygon, Star, random_shape
>>> canvas.draw(Polygon(0.2, sides=6, rotation=30), color)
>>> canvas.draw(random_shape(rng=rng), Color.random(rng=rng))
"""

from __future__ import annotations

import random

from shapegen.config import ShapeRange
from shapegen.shapes.base import Shape
from shapegen.shapes.circle import Circle
from shapegen.shapes.polygon import Polygon
from shapegen.shapes.star import Star

SHAPE_TYPES = ("circle", "polygon", "star")


def random_shape(
    options: ShapeRange | None = None, rng: random.Random | None = None
) -> Shape:
    """Return a Circle, Polygon or Star with equal probability.

    The chosen variant is built from the matching sub-range of *options*.
    """
    opts = options if options is not None else ShapeRange()
    r = rng if rng is not None else random
    kind = r.choice(SHAPE_TYPES)
    if kind == "circle":
        return Circle.random(opts.circle, rng)
    if kind == "polygon":
        return Polygon.random(opts.polygon, rng)
    return Star.random(opts.star, rng)


__all__ = ["SHAPE_TYPES", "Circle", "Polygon", "Shape", "Star", "random_shape"]
