"""Filled circle."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from shapegen.color import Color
from shapegen.config import CircleRange, hundredths
from shapegen.shapes.base import Shape

if TYPE_CHECKING:
    from shapegen.canvas import Canvas

logger = logging.getLogger(__name__)


class Circle(Shape):
    def __repr__(self) -> str:
        return f"Circle(ratio={self.ratio})"

    def draw(self, canvas: Canvas, color: Color) -> None:
        radius, (x, y) = self.place(canvas)
        surface = canvas.surface
        with surface.color(color.red, color.green, color.blue, color.to_raster_alpha()) as ink:
            surface.filled_ellipse(x, y, radius * 2, radius * 2, ink)
        logger.debug("Drew %r at (%d, %d) radius=%d", self, x, y, radius)

    @classmethod
    def random(
        cls, options: CircleRange | None = None, rng: random.Random | None = None
    ) -> Circle:
        """Return a circle with a ratio drawn in hundredths from *options*."""
        opts = options if options is not None else CircleRange()
        r = rng if rng is not None else random
        return cls(r.randint(hundredths(opts.min_ratio), hundredths(opts.max_ratio)) / 100)
