"""Raster backend: a Pillow surface exposing the primitives shapes draw with."""

from shapegen.rendering.surface import FORMATS, MAX_COLORS, Surface

__all__ = ["FORMATS", "MAX_COLORS", "Surface"]
