"""Geometry core - value type, shape predicates and errors."""

from .errors import (
    CommandNotFoundError,
    GeometryError,
    NotIdentifiableError,
    UnparseableGeometryError,
)
from .geometry import GEOMETRY_PATTERN, Geometry, Modifier
from .shape_traits import (
    Dimensioned,
    aspect,
    ieee_divide,
    is_horizontal,
    is_square,
    is_vertical,
    larger,
    smaller,
)

__all__ = [
    "Geometry",
    "Modifier",
    "GEOMETRY_PATTERN",
    "Dimensioned",
    "aspect",
    "ieee_divide",
    "is_horizontal",
    "is_square",
    "is_vertical",
    "larger",
    "smaller",
    "GeometryError",
    "UnparseableGeometryError",
    "NotIdentifiableError",
    "CommandNotFoundError",
]
