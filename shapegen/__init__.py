"""shapegen — random abstract images from alpha-blended shapes.

Quick start
-----------
>>> from shapegen import Canvas, Color, Circle
>>> canvas = Canvas(200, 200)
>>> canvas.fill(Color(255, 0, 0, 1.0))
>>> canvas.draw(Circle(0.2), Color(0, 0, 255, 0.5))
>>> image = canvas.render(format="png")
>>> image.path, image.mime_type

Random generation
-----------------
>>> import random
>>> rng = random.Random(42)
>>> canvas = Canvas(640, 480, rng=rng).enable_transparency()
>>> for _ in range(30):
...     canvas.draw(random_shape(rng=rng), Color.random(rng=rng))
>>> canvas.render("art.webp", format="webp", quality=90)
"""

from shapegen.canvas import Canvas
from shapegen.color import Color
from shapegen.config import (
    CircleRange,
    ColorRange,
    PolygonRange,
    ShapeRange,
    StarRange,
    make_shape_range,
)
from shapegen.errors import (
    InvalidParameterError,
    ResourceError,
    ShapegenError,
    UnsupportedFormatError,
)
from shapegen.models import RenderedImage
from shapegen.shapes import Circle, Polygon, Shape, Star, random_shape

__version__ = "0.1.0"

__all__ = [
    # Drawing
    "Canvas",
    "Color",
    "RenderedImage",
    # Shapes
    "Shape",
    "Circle",
    "Polygon",
    "Star",
    "random_shape",
    # Sampling ranges
    "ColorRange",
    "CircleRange",
    "PolygonRange",
    "StarRange",
    "ShapeRange",
    "make_shape_range",
    # Errors
    "ShapegenError",
    "InvalidParameterError",
    "UnsupportedFormatError",
    "ResourceError",
]
