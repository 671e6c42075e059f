"""cl_geometry - image resize/crop geometry for attachment style processing."""

from .config import GeometrySettings, get_settings, reset_settings
from .geometry import (
    CommandNotFoundError,
    Geometry,
    GeometryError,
    Modifier,
    NotIdentifiableError,
    UnparseableGeometryError,
)
from .plugins.image_identify import IdentifyWrapper, geometry_from_file, probe_dimensions
from .plugins.style_geometry import (
    StyleDefinition,
    StyleGeometryParams,
    StylePlan,
    plan_styles,
    plan_styles_for_file,
)
from .utils.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Geometry",
    "Modifier",
    "GeometryError",
    "UnparseableGeometryError",
    "NotIdentifiableError",
    "CommandNotFoundError",
    "GeometrySettings",
    "get_settings",
    "reset_settings",
    "IdentifyWrapper",
    "geometry_from_file",
    "probe_dimensions",
    "StyleDefinition",
    "StyleGeometryParams",
    "StylePlan",
    "plan_styles",
    "plan_styles_for_file",
    "configure_logging",
    "__version__",
]
