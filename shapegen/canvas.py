"""Canvas: the drawing surface shapes are composited onto."""

from __future__ import annotations

import logging
import math
import os
import random
import tempfile

from shapegen._validation import require_positive
from shapegen.color import Color
from shapegen.errors import ResourceError
from shapegen.models import RenderedImage
from shapegen.rendering.surface import Surface
from shapegen.shapes.base import Shape

logger = logging.getLogger(__name__)

# Transparent black used to clear the surface
_TRANSPARENT = Color(0, 0, 0, 0.0)


class Canvas:
    """A fixed-size image that shapes are drawn on.

    The canvas owns its surface for its whole lifetime. Drawing mutates it in
    place; rendering only reads it, so one canvas can be exported to several
    files or formats.

    Not thread-safe: use one canvas per thread.

    >>> canvas = Canvas(400, 300, rng=random.Random(7))
    >>> canvas.enable_transparency()
    >>> for _ in range(20):
    ...     canvas.draw(Shape.random(rng=canvas.rng), Color.random(rng=canvas.rng))
    >>> image = canvas.render("out.png")
    """

    def __init__(self, width: int, height: int, *, rng: random.Random | None = None) -> None:
        """
        Args:
            width:  Width in pixels, > 0.
            height: Height in pixels, > 0.
            rng:    Random source for shape placement. Defaults to a fresh,
                    unseeded ``random.Random``.
        """
        self._width = require_positive(width, "width")
        self._height = require_positive(height, "height")
        self._surface = Surface(self._width, self._height)
        self.rng = rng if rng is not None else random.Random()
        logger.debug("Created %dx%d canvas", self._width, self._height)

    @classmethod
    def create(cls, width: int, height: int, *, rng: random.Random | None = None) -> Canvas:
        return cls(width, height, rng=rng)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def surface(self) -> Surface:
        """The underlying raster surface, for shapes drawing onto this canvas."""
        return self._surface

    @property
    def geometric_mean(self) -> float:
        """``sqrt(width * height)``, the scale shape ratios are measured against."""
        return math.sqrt(self._width * self._height)

    def get_geometric_mean(self) -> float:
        return self.geometric_mean

    def enable_transparency(self) -> Canvas:
        """Clear the canvas to fully transparent and keep alpha on export.

        Call this before drawing: it overwrites everything drawn so far.
        """
        clear = _TRANSPARENT
        with self._surface.color(clear.red, clear.green, clear.blue, clear.to_raster_alpha()) as ink:
            self._surface.clear(ink)
        self._surface.save_alpha = True
        return self

    def fill(self, color: Color) -> Canvas:
        """Composite *color* over the entire canvas."""
        with self._surface.color(color.red, color.green, color.blue, color.to_raster_alpha()) as ink:
            self._surface.fill(ink)
        return self

    def draw(self, shape: Shape, color: Color) -> Canvas:
        shape.draw(self, color)
        return self

    def render(
        self,
        path: str | os.PathLike | None = None,
        format: str = "png",
        **options,
    ) -> RenderedImage:
        """Encode the canvas to *path* and describe the result.

        Args:
            path:    Destination file. A new temporary file is created when
                     omitted.
            format:  One of ``avif``, ``bmp``, ``gif``, ``jpeg``, ``png``,
                     ``wbmp``, ``webp`` or ``xbm`` (case-sensitive).
            options: Passed through to Pillow's writer, e.g. ``quality=85``
                     for jpeg/webp/avif or ``compress_level=9`` for png.

        Raises:
            UnsupportedFormatError: Unknown format, or one the installed
                Pillow cannot write. Nothing is written in that case.
            ResourceError: The temporary file or the output cannot be written.
        """
        mime_type = self._surface.mime_type(format)
        owns_path = path is None
        if owns_path:
            path = _temporary_path(format)
        path = os.fspath(path)
        try:
            self._surface.save(path, format, **options)
        except Exception:
            # the caller never saw this path, so nothing else would remove it
            if owns_path and os.path.exists(path):
                os.unlink(path)
            raise
        logger.debug("Rendered %dx%d %s to %s", self._width, self._height, format, path)
        return RenderedImage(path, self._width, self._height, mime_type)


def _temporary_path(fmt: str) -> str:
    try:
        fd, name = tempfile.mkstemp(prefix="img", suffix=f".{fmt}")
    except OSError as exc:
        raise ResourceError("Could not create temporary file.") from exc
    os.close(fd)
    return name
