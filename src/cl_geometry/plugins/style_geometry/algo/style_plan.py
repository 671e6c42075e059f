"""Pure per-style planning: final sizes and convert arguments."""

from pathlib import Path

from loguru import logger

from ....config import GeometrySettings, ProbeBackend
from ....geometry.geometry import Geometry
from ....utils.profiling import timed
from ...image_identify.probe import geometry_from_file
from ..schema import StyleDefinition, StyleGeometryParams, StylePlan

CROP_MODIFIER = "#"


def convert_arguments(scale: str, crop: str | None) -> list[str]:
    """``convert`` arguments for a resize, followed by the crop when given."""
    args = ["-resize", scale]
    if crop:
        args += ["-crop", crop, "+repage"]
    return args


def plan_style(style: StyleDefinition, original: Geometry) -> StylePlan:
    """Plan one style against the original's geometry.

    Raises:
        UnparseableGeometryError: If the style geometry cannot be parsed
    """
    target = Geometry.parse_strict(style.geometry)
    crop = target.modifier == CROP_MODIFIER

    width, height = target.resolve_dimensions(original.width, original.height)
    # cropped styles are scaled to the exact box; the modifier only selects the mode
    destination = Geometry(target.width, target.height) if crop else target
    scale, crop_geometry = original.transformation_to(destination, crop=crop)

    plan = StylePlan(
        name=style.name,
        geometry=style.geometry,
        width=width,
        height=height,
        scale=scale,
        crop=crop_geometry,
        format=style.format,
        convert_args=convert_arguments(scale, crop_geometry),
    )
    logger.debug(f"Style {style.name} ({style.geometry}): {width}x{height}, args={plan.convert_args}")
    return plan


@timed
def plan_styles(params: StyleGeometryParams, original: Geometry) -> list[StylePlan]:
    """Plan every style in ``params``, in definition order."""
    return [plan_style(style, original) for style in params.definitions()]


def plan_styles_for_file(
    params: StyleGeometryParams,
    filepath: str | Path,
    backend: ProbeBackend | None = None,
    settings: GeometrySettings | None = None,
) -> list[StylePlan]:
    """Probe ``filepath`` for its dimensions, then plan every style.

    Raises:
        NotIdentifiableError: If the file's dimensions cannot be determined
    """
    original = geometry_from_file(filepath, backend=backend, settings=settings)
    logger.info(f"Planning {len(params.styles)} styles for {filepath} ({original})")
    return plan_styles(params, original)
