"""Dimension probe plugin - reads an image's pixel size as ``WxH`` text."""

from .algo.identify_wrapper import IdentifyWrapper
from .algo.pillow_probe import pillow_probe
from .probe import geometry_from_file, probe_dimensions

__all__ = ["IdentifyWrapper", "pillow_probe", "geometry_from_file", "probe_dimensions"]
