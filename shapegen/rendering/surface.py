"""Pillow-backed raster surface.

The surface speaks the rasterizer dialect the shapes are written against:

- colors are allocated into a handle table and released after use
- transparency runs 0 (opaque) .. 127 (fully transparent)
- filled primitives are alpha-composited over the existing pixels
- alpha is only written on export once ``save_alpha`` is enabled

Pixel storage, scan conversion and encoding are Pillow's.
"""

from __future__ import annotations

import itertools
import os
from contextlib import contextmanager
from typing import Iterator, Sequence

import PIL
from packaging.version import Version
from PIL import Image, ImageDraw, features

from shapegen._validation import require_int
from shapegen.errors import ResourceError, UnsupportedFormatError
from shapegen.rendering import wbmp  # noqa: F401  (registers the WBMP writer)

RASTER_ALPHA_MAX = 127

# Outstanding color handles allowed at once
MAX_COLORS = 256

# Export format name -> Pillow format identifier
FORMATS: dict[str, str] = {
    "avif": "AVIF",
    "bmp": "BMP",
    "gif": "GIF",
    "jpeg": "JPEG",
    "png": "PNG",
    "wbmp": "WBMP",
    "webp": "WEBP",
    "xbm": "XBM",
}

# First Pillow release with a built-in AVIF encoder
AVIF_MIN_PILLOW = Version("11.2.0")

_RGB_ONLY = {"bmp", "jpeg"}
_BILEVEL = {"wbmp", "xbm"}

RGBA = tuple[int, int, int, int]


def raster_alpha_to_opacity(alpha: int) -> int:
    """Map 0 (opaque) .. 127 (transparent) onto Pillow's 0 (transparent) .. 255 (opaque)."""
    return round((RASTER_ALPHA_MAX - alpha) * 255 / RASTER_ALPHA_MAX)


def pillow_supports_avif() -> bool:
    if Version(PIL.__version__) < AVIF_MIN_PILLOW:
        return False
    try:
        return features.check_module("avif")
    except ValueError:  # feature table without an "avif" entry
        return False


class Surface:
    """A fixed-size RGBA pixel buffer.

    New surfaces are opaque black. All drawing goes through color handles
    obtained from :meth:`allocate_color` (or the :meth:`color` context
    manager) and released with :meth:`deallocate_color`.
    """

    def __init__(self, width: int, height: int) -> None:
        try:
            self._image = Image.new("RGBA", (width, height), (0, 0, 0, 255))
        except (MemoryError, ValueError, OverflowError, OSError) as exc:
            raise ResourceError(f"Could not create a {width}x{height} image.") from exc
        self._colors: dict[int, RGBA] = {}
        self._handles = itertools.count(1)
        self.save_alpha = False

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    @property
    def allocated_colors(self) -> int:
        """Number of color handles currently outstanding."""
        return len(self._colors)

    # ── color table ──────────────────────────────────────────────────────────

    def allocate_color(self, red: int, green: int, blue: int, alpha: int) -> int:
        """Allocate a color and return its handle.

        *alpha* is on the 0 (opaque) .. 127 (transparent) scale.
        """
        require_int(red, 0, 255, "red component value")
        require_int(green, 0, 255, "green component value")
        require_int(blue, 0, 255, "blue component value")
        require_int(alpha, 0, RASTER_ALPHA_MAX, "raster alpha value")
        if len(self._colors) >= MAX_COLORS:
            raise ResourceError("Could not allocate color.")
        handle = next(self._handles)
        self._colors[handle] = (red, green, blue, raster_alpha_to_opacity(alpha))
        return handle

    def deallocate_color(self, handle: int) -> None:
        self._colors.pop(handle, None)

    @contextmanager
    def color(self, red: int, green: int, blue: int, alpha: int) -> Iterator[int]:
        """Allocate a color for the duration of a ``with`` block."""
        handle = self.allocate_color(red, green, blue, alpha)
        try:
            yield handle
        finally:
            self.deallocate_color(handle)

    def _rgba(self, handle: int) -> RGBA:
        try:
            return self._colors[handle]
        except KeyError:
            raise ResourceError(f"Unknown color handle {handle}.") from None

    # ── primitives ───────────────────────────────────────────────────────────

    def _composite(self, layer: Image.Image) -> None:
        # Image.alpha_composite builds a new image, so a failure leaves pixels untouched
        self._image.alpha_composite(layer)

    def _layer(self) -> Image.Image:
        return Image.new("RGBA", self._image.size, (0, 0, 0, 0))

    def clear(self, handle: int) -> None:
        """Overwrite every pixel with the handle's color, alpha included."""
        self._image.paste(self._rgba(handle), (0, 0) + self._image.size)

    def fill(self, handle: int) -> None:
        """Composite the handle's color over the whole surface."""
        self._composite(Image.new("RGBA", self._image.size, self._rgba(handle)))

    def filled_ellipse(self, cx: int, cy: int, width: int, height: int, handle: int) -> None:
        rgba = self._rgba(handle)
        layer = self._layer()
        box = [cx - width / 2, cy - height / 2, cx + width / 2, cy + height / 2]
        ImageDraw.Draw(layer).ellipse(box, fill=rgba)
        self._composite(layer)

    def filled_polygon(self, coords: Sequence[float], handle: int) -> None:
        """Fill the polygon given as a flat ``[x0, y0, x1, y1, ...]`` sequence."""
        if len(coords) < 6 or len(coords) % 2:
            raise ValueError(
                f"A polygon needs at least 3 (x, y) pairs, got {len(coords)} values."
            )
        rgba = self._rgba(handle)
        layer = self._layer()
        ImageDraw.Draw(layer).polygon(list(coords), fill=rgba)
        self._composite(layer)

    def getpixel(self, x: int, y: int) -> RGBA:
        return self._image.getpixel((x, y))

    # ── export ───────────────────────────────────────────────────────────────

    def check_format(self, fmt: str) -> str:
        """Return the Pillow format name for *fmt*, or raise if it cannot be written."""
        if fmt not in FORMATS:
            raise UnsupportedFormatError(f'Unsupported image format "{fmt}".')
        if fmt == "avif" and not pillow_supports_avif():
            raise UnsupportedFormatError(
                f"The AVIF format requires Pillow>={AVIF_MIN_PILLOW} built with "
                f"libavif (you have Pillow {PIL.__version__})."
            )
        pil_format = FORMATS[fmt]
        Image.init()
        if pil_format not in Image.SAVE:
            raise UnsupportedFormatError(
                f'Pillow {PIL.__version__} cannot write the "{fmt}" format.'
            )
        return pil_format

    def mime_type(self, fmt: str) -> str:
        pil_format = self.check_format(fmt)
        return Image.MIME.get(pil_format, "application/octet-stream")

    def export_image(self, fmt: str) -> Image.Image:
        """Return a copy of the pixels in a mode *fmt* can encode."""
        if fmt in _BILEVEL:
            return self._image.convert("RGB").convert("1", dither=Image.Dither.NONE)
        if fmt in _RGB_ONLY or not self.save_alpha:
            return self._image.convert("RGB")
        return self._image.copy()

    def save(self, path: str | os.PathLike, fmt: str, **options) -> None:
        """Encode the surface to *path*. *options* go to Pillow's writer as-is."""
        pil_format = self.check_format(fmt)
        image = self.export_image(fmt)
        try:
            image.save(path, format=pil_format, **options)
        except OSError as exc:
            raise ResourceError(f"Could not write {fmt} image to {path}: {exc}") from exc
