"""Star with 4 to 8 points."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from shapegen._geometry import Point, flatten, star_polygon
from shapegen._validation import require_int
from shapegen.color import Color
from shapegen.config import StarRange, hundredths
from shapegen.shapes.base import Shape

if TYPE_CHECKING:
    from shapegen.canvas import Canvas

logger = logging.getLogger(__name__)


class Star(Shape):
    """A star drawn as a ``2 * points`` polygon.

    Tips sit at the full radius and the notches between them at half of it.
    """

    def __init__(self, ratio: float, points: int, rotation: int) -> None:
        super().__init__(ratio)
        self.points = points
        self.rotation = rotation

    def __repr__(self) -> str:
        return f"Star(ratio={self.ratio}, points={self.points}, rotation={self.rotation})"

    @property
    def points(self) -> int:
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        self._points = require_int(value, 4, 8, "number of points")

    @property
    def rotation(self) -> int:
        return self._rotation

    @rotation.setter
    def rotation(self, value: int) -> None:
        self._rotation = require_int(value, 0, 360, "rotation angle")

    def vertices(self, center: Point, radius: float) -> list[Point]:
        return star_polygon(center, radius, self._points, self._rotation)

    def draw(self, canvas: Canvas, color: Color) -> None:
        radius, center = self.place(canvas)
        coords = flatten(self.vertices(center, radius))
        surface = canvas.surface
        with surface.color(color.red, color.green, color.blue, color.to_raster_alpha()) as ink:
            surface.filled_polygon(coords, ink)
        logger.debug("Drew %r at %s radius=%d", self, center, radius)

    @classmethod
    def random(
        cls, options: StarRange | None = None, rng: random.Random | None = None
    ) -> Star:
        opts = options if options is not None else StarRange()
        r = rng if rng is not None else random
        ratio = r.randint(hundredths(opts.min_ratio), hundredths(opts.max_ratio)) / 100
        points = r.randint(opts.min_points, opts.max_points)
        rotation = r.randint(opts.min_rotation, opts.max_rotation)
        return cls(ratio, points, rotation)
