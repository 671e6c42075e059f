"""Geometry value type.

A ``Geometry`` holds a width, a height and an optional modifier character,
as written in ImageMagick style strings such as ``"100x50"``, ``"50x50#"``
or ``"300x300>"``. It knows how to parse and serialize itself, how to derive
the scale and crop arguments that turn a source image into a destination
shape, and which final pixel size a style produces for a known original.
"""

import math
import re
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import override

from . import shape_traits
from .errors import NotIdentifiableError, UnparseableGeometryError

Modifier = Literal["#", "%", "<", ">", "@", "^", "!"]

# Searched, not anchored: the first occurrence anywhere in the text wins.
GEOMETRY_PATTERN: re.Pattern[str] = re.compile(
    r"\b(\d*)x?(\d*)\b([><#@%^!])?", re.IGNORECASE
)

_NUMERIC_PREFIX: re.Pattern[str] = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _to_float(value: object) -> float:
    """Coerce ``value`` to a float the lenient way: unusable input becomes 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMERIC_PREFIX.match(str(value).strip())
    return float(match.group(0)) if match else 0.0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_pixels(value: float) -> int:
    return max(_round_half_away(value), 1)


OFFSET_DECIMALS = 6


def _format_offset(value: float) -> str:
    """Fixed-point offset with trailing zeros trimmed; float noise collapses to 0."""
    if not math.isfinite(value):
        return repr(value)
    text = f"{value:.{OFFSET_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


class Geometry(BaseModel):
    """Width, height and optional modifier of an image or an image style."""

    width: float = 0.0
    height: float = 0.0
    modifier: Modifier | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def __init__(
        self,
        width: object = None,
        height: object = None,
        modifier: Modifier | None = None,
        **data: object,
    ) -> None:
        super().__init__(width=width, height=height, modifier=modifier, **data)

    @field_validator("width", "height", mode="before")
    @classmethod
    def coerce_dimension(cls, value: object) -> float:
        return _to_float(value)

    # ─────────────────────────────────────────────────────────────
    # Parsing
    # ─────────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str | None) -> "Geometry | None":
        """Parse a ``WxH[modifier]`` string.

        Missing width or height default to 0. Returns None when nothing in
        ``text`` matches, which callers treat as "no geometry".

        Examples:
            >>> Geometry.parse("50x50#")
            Geometry(width=50.0, height=50.0, modifier='#')
            >>> Geometry.parse("") is None
            True
        """
        if text is None:
            return None
        match = GEOMETRY_PATTERN.search(text)
        if match is None:
            return None
        width, height, modifier = match.groups()
        return cls(width, height, modifier)

    @classmethod
    def parse_strict(cls, text: str | None) -> "Geometry":
        """Like :meth:`parse` but raises when nothing matches."""
        geometry = cls.parse(text)
        if geometry is None:
            raise UnparseableGeometryError(f"Cannot parse geometry from {text!r}")
        return geometry

    @classmethod
    def from_dimensions_probe(
        cls, probe_result: str | None, source: str | None = None
    ) -> "Geometry":
        """Build a Geometry from the ``WxH`` text reported by a dimension probe.

        Args:
            probe_result: Raw text output of the probe (e.g. ``"434x66"``)
            source: Name of the probed file, used in error messages

        Raises:
            NotIdentifiableError: If the text is blank or cannot be parsed
        """
        name = source if source is not None else "image"
        if probe_result is None or not probe_result.strip():
            raise NotIdentifiableError(f"{name} is not recognized by the dimension probe.")
        geometry = cls.parse(probe_result)
        if geometry is None:
            raise NotIdentifiableError(
                f"{name} reported unusable dimensions: {probe_result!r}"
            )
        return geometry

    # ─────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────

    def to_string(self) -> str:
        """Canonical ``[W][xH][modifier]`` form, with truncated integer sizes."""
        text = ""
        if self.width > 0:
            text += str(int(self.width))
        if self.height > 0:
            text += f"x{int(self.height)}"
        if self.modifier:
            text += self.modifier
        return text

    @override
    def __str__(self) -> str:
        return self.to_string()

    # ─────────────────────────────────────────────────────────────
    # Shape
    # ─────────────────────────────────────────────────────────────

    @property
    def is_square(self) -> bool:
        return shape_traits.is_square(self)

    @property
    def is_horizontal(self) -> bool:
        return shape_traits.is_horizontal(self)

    @property
    def is_vertical(self) -> bool:
        return shape_traits.is_vertical(self)

    @property
    def aspect(self) -> float:
        return shape_traits.aspect(self)

    @property
    def larger(self) -> float:
        return shape_traits.larger(self)

    @property
    def smaller(self) -> float:
        return shape_traits.smaller(self)

    # ─────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────

    def transformation_to(
        self, dst: "Geometry", crop: bool = False
    ) -> tuple[str, str | None]:
        """Return the ``(scale, crop)`` ImageMagick arguments that turn this
        geometry into ``dst``.

        Without ``crop`` the scale argument is ``dst`` itself and there is no
        crop argument. With ``crop``, ``dst`` is taken as the exact final
        size: the source is scaled until it covers ``dst`` completely and
        the overhang is cropped away, centered.

        The source width and height must be non-zero; otherwise the scale
        ratios come out as ``inf``/``nan`` and flow into the result as is.
        """
        if not crop:
            return dst.to_string(), None

        ratio = Geometry(
            shape_traits.ieee_divide(dst.width, self.width),
            shape_traits.ieee_divide(dst.height, self.height),
        )
        scale_geometry, scale = self._scaling(dst, ratio)
        crop_geometry = self._cropping(dst, ratio, scale)
        return scale_geometry, crop_geometry

    def _scaling(self, dst: "Geometry", ratio: "Geometry") -> tuple[str, float]:
        if ratio.is_horizontal or ratio.is_square:
            return f"{int(dst.width)}x", ratio.width
        return f"x{int(dst.height)}", ratio.height

    def _cropping(self, dst: "Geometry", ratio: "Geometry", scale: float) -> str:
        size = f"{int(dst.width)}x{int(dst.height)}"
        if ratio.is_horizontal or ratio.is_square:
            offset = (self.height * scale - dst.height) / 2
            return f"{size}+0+{_format_offset(offset)}"
        offset = (self.width * scale - dst.width) / 2
        return f"{size}+{_format_offset(offset)}+0"

    def resolve_dimensions(self, orig_width: float, orig_height: float) -> tuple[int, int]:
        """Final pixel size produced by applying this geometry to an original.

        ``#`` forces the exact size, ``%`` scales by percentage, and ``<``,
        ``>`` or no modifier fit the original inside the box while keeping
        its aspect ratio (``<`` only enlarges, ``>`` only shrinks). The
        ``@``, ``^`` and ``!`` modifiers are not resolved here and leave the
        original size untouched. Each axis is rounded and never drops below
        one pixel.

        Examples:
            >>> Geometry(100, 100).resolve_dimensions(434, 66)
            (100, 15)
        """
        orig_width = float(orig_width)
        orig_height = float(orig_height)

        if self.modifier == "#":
            new_width, new_height = self.width, self.height
        elif self.modifier == "%":
            scale_x = self.width if self.width != 0 else 100.0
            scale_y = self.height if self.height != 0 else self.width
            new_width = scale_x * (orig_width / 100.0)
            new_height = scale_y * (orig_height / 100.0)
        elif self.modifier in ("<", ">", None):
            new_width, new_height = self._constrained_fit(orig_width, orig_height)
        else:
            new_width, new_height = orig_width, orig_height

        return _to_pixels(new_width), _to_pixels(new_height)

    def _constrained_fit(self, orig_width: float, orig_height: float) -> tuple[float, float]:
        if orig_width == 0 or orig_height == 0:
            scale_factor = 1.0
        elif self.width != 0 and self.height != 0:
            scale_factor = min(self.width / orig_width, self.height / orig_height)
        elif self.width != 0:
            scale_factor = self.width / orig_width
        else:
            scale_factor = self.height / orig_height

        new_width = scale_factor * orig_width
        new_height = scale_factor * orig_height

        if self.modifier == "<":
            # only enlarge
            if new_width < orig_width:
                new_width = orig_width
            if new_height < orig_height:
                new_height = orig_height
        elif self.modifier == ">":
            # only shrink
            if new_width > orig_width:
                new_width = orig_width
            if new_height > orig_height:
                new_height = orig_height

        return new_width, new_height
