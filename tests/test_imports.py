"""Smoke tests: verify all public subpackages are importable."""


def test_import_root():
    from shapegen import __version__

    assert __version__


def test_import_config():
    from shapegen.config import ColorRange, ShapeRange

    assert ColorRange and ShapeRange


def test_import_geometry():
    from shapegen._geometry import regular_polygon

    assert regular_polygon


def test_import_shapes():
    from shapegen.shapes import Circle, Polygon, Shape, Star, random_shape

    assert Circle and Polygon and Shape and Star and random_shape


def test_import_rendering():
    from shapegen.rendering import Surface

    assert Surface


def test_import_wbmp_registers_writer():
    from PIL import Image

    import shapegen.rendering.wbmp  # noqa: F401

    assert "WBMP" in Image.SAVE


def test_import_canvas():
    from shapegen import Canvas, RenderedImage

    assert Canvas and RenderedImage
