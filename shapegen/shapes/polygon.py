"""Regular polygon with 3 to 12 sides."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from shapegen._geometry import Point, flatten, regular_polygon
from shapegen._validation import require_int
from shapegen.color import Color
from shapegen.config import PolygonRange, hundredths
from shapegen.shapes.base import Shape

if TYPE_CHECKING:
    from shapegen.canvas import Canvas

logger = logging.getLogger(__name__)


class Polygon(Shape):
    """A regular polygon.

    Vertex ``i`` sits at ``rotation + 360 / sides * i`` degrees from the
    center, so ``rotation`` turns the whole vertex ring.
    """

    def __init__(self, ratio: float, sides: int, rotation: int) -> None:
        super().__init__(ratio)
        self.sides = sides
        self.rotation = rotation

    def __repr__(self) -> str:
        return f"Polygon(ratio={self.ratio}, sides={self.sides}, rotation={self.rotation})"

    @property
    def sides(self) -> int:
        return self._sides

    @sides.setter
    def sides(self, value: int) -> None:
        self._sides = require_int(value, 3, 12, "number of sides")

    @property
    def rotation(self) -> int:
        """Rotation angle in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: int) -> None:
        self._rotation = require_int(value, 0, 360, "rotation angle")

    def vertices(self, center: Point, radius: float) -> list[Point]:
        return regular_polygon(center, radius, self._sides, self._rotation)

    def draw(self, canvas: Canvas, color: Color) -> None:
        radius, center = self.place(canvas)
        coords = flatten(self.vertices(center, radius))
        surface = canvas.surface
        with surface.color(color.red, color.green, color.blue, color.to_raster_alpha()) as ink:
            surface.filled_polygon(coords, ink)
        logger.debug("Drew %r at %s radius=%d", self, center, radius)

    @classmethod
    def random(
        cls, options: PolygonRange | None = None, rng: random.Random | None = None
    ) -> Polygon:
        opts = options if options is not None else PolygonRange()
        r = rng if rng is not None else random
        ratio = r.randint(hundredths(opts.min_ratio), hundredths(opts.max_ratio)) / 100
        sides = r.randint(opts.min_sides, opts.max_sides)
        rotation = r.randint(opts.min_rotation, opts.max_rotation)
        return cls(ratio, sides, rotation)
