"""Style geometry plugin - plans derived image sizes from style definitions."""

from .algo.style_plan import convert_arguments, plan_style, plan_styles, plan_styles_for_file
from .schema import StyleDefinition, StyleGeometryParams, StylePlan

__all__ = [
    "StyleDefinition",
    "StyleGeometryParams",
    "StylePlan",
    "convert_arguments",
    "plan_style",
    "plan_styles",
    "plan_styles_for_file",
]
