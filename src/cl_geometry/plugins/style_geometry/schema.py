"""Style definitions and per-style plan schemas."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator

StyleValue = str | list[str]


class StyleDefinition(BaseModel):
    """One named derived size of an attachment.

    Attributes:
        name: Style name (e.g. ``"thumb"``)
        geometry: Geometry string (e.g. ``"32x32#"``)
        format: Output file extension, or None to keep the original's
    """

    name: str = Field(..., min_length=1)
    geometry: str
    format: str | None = None

    @classmethod
    def from_value(cls, name: str, value: str | Sequence[str]) -> "StyleDefinition":
        """Build from ``"32x32#"`` or ``["32x32#", "gif"]``."""
        if isinstance(value, str):
            return cls(name=name, geometry=value)
        if len(value) not in (1, 2):
            raise ValueError(f"Style {name!r} must be a geometry or a [geometry, format] pair")
        return cls(name=name, geometry=value[0], format=value[1] if len(value) == 2 else None)


class StyleGeometryParams(BaseModel):
    """Styles to plan, keyed by name, in the order they should be rendered."""

    styles: dict[str, StyleValue] = Field(
        default_factory=dict,
        description="Style name to geometry string or [geometry, format] pair",
    )

    @field_validator("styles")
    @classmethod
    def validate_style_values(cls, v: dict[str, StyleValue]) -> dict[str, StyleValue]:
        for name, value in v.items():
            if isinstance(value, list) and len(value) not in (1, 2):
                raise ValueError(f"Style {name!r} must be a geometry or a [geometry, format] pair")
        return v

    def definitions(self) -> list[StyleDefinition]:
        return [StyleDefinition.from_value(name, value) for name, value in self.styles.items()]


class StylePlan(BaseModel):
    """Everything needed to render one style from a known original."""

    name: str
    geometry: str = Field(..., description="Style geometry as given")
    width: int = Field(..., ge=1, description="Final width in pixels")
    height: int = Field(..., ge=1, description="Final height in pixels")
    scale: str = Field(..., description="Resize argument")
    crop: str | None = Field(default=None, description="Crop argument, for cropped styles")
    format: str | None = None
    convert_args: list[str] = Field(default_factory=list)
