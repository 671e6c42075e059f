"""Exceptions raised by geometry parsing and dimension probing."""


class GeometryError(Exception):
    """Base class for every error raised by cl_geometry."""

    def __init__(self, message: str = "An unknown geometry error occurred."):
        self.message: str = message
        super().__init__(self.message)


class UnparseableGeometryError(GeometryError):
    """Raised when a geometry string matches nothing and a result is required."""


class NotIdentifiableError(GeometryError):
    """Raised when a dimension probe reports nothing usable for an image.

    Unlike an unparseable style string, this points at bad upstream tool
    output: the source image's dimensions are unknown.
    """


class CommandNotFoundError(GeometryError):
    """Raised when the external dimension probe binary cannot be run."""
