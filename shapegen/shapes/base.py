"""Abstract shape contract shared by every drawable shape."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from shapegen._geometry import random_center, shape_radius
from shapegen._validation import require_float
from shapegen.color import Color

if TYPE_CHECKING:
    from shapegen.canvas import Canvas
    from shapegen.config import ShapeRange


class Shape(ABC):
    """A filled shape sized relative to the canvas it is drawn on.

    ``ratio`` is the shape's diameter as a fraction of the canvas geometric
    mean, so a shape keeps the same visual weight on non-square canvases.
    Every draw picks a fresh random center.
    """

    def __init__(self, ratio: float) -> None:
        self.ratio = ratio

    @property
    def ratio(self) -> float:
        return self._ratio

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._ratio = require_float(value, 0.0, 1.0, "size ratio")

    def place(self, canvas: Canvas) -> tuple[int, tuple[int, int]]:
        """Return ``(radius, (x, y))`` for one draw on *canvas*."""
        radius = shape_radius(self._ratio, canvas.geometric_mean)
        center = random_center(canvas.width, canvas.height, radius, canvas.rng)
        return radius, center

    @abstractmethod
    def draw(self, canvas: Canvas, color: Color) -> None:
        """Composite this shape onto *canvas* in *color* at a random position."""
        ...

    @staticmethod
    def random(
        options: ShapeRange | None = None, rng: random.Random | None = None
    ) -> Shape:
        """Return a random Circle, Polygon or Star. See :func:`random_shape`."""
        from shapegen.shapes import random_shape

        return random_shape(options, rng)
