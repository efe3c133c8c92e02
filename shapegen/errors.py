"""Exception hierarchy for shapegen."""


class ShapegenError(Exception):
    """Base class for every error raised by shapegen."""


class InvalidParameterError(ShapegenError, ValueError):
    """Raised when a constructor or setter argument is outside its valid range."""


class UnsupportedFormatError(ShapegenError, ValueError):
    """Raised for an unknown export format, or one the installed Pillow cannot write."""


class ResourceError(ShapegenError, RuntimeError):
    """Raised when a surface, color handle or output file cannot be allocated."""
