"""Probe an image file and turn the report into a Geometry."""

from pathlib import Path

from ...config import GeometrySettings, ProbeBackend, get_settings
from ...geometry.errors import NotIdentifiableError
from ...geometry.geometry import Geometry
from .algo.identify_wrapper import IdentifyWrapper
from .algo.pillow_probe import pillow_probe


def probe_dimensions(
    filepath: str | Path | None,
    backend: ProbeBackend | None = None,
    settings: GeometrySettings | None = None,
) -> str:
    """Run the configured probe and return its raw ``WxH`` text."""
    settings = settings or get_settings()
    backend = backend or settings.probe_backend

    if filepath is None or not str(filepath).strip():
        raise NotIdentifiableError("Cannot find the geometry of a file with a blank name")

    if backend == "identify":
        wrapper = IdentifyWrapper(binary=settings.identify_binary, timeout=settings.probe_timeout)
        return wrapper.probe(filepath)
    if backend == "pillow":
        return pillow_probe(filepath)
    raise ValueError(f"Unknown probe backend: {backend!r}")


def geometry_from_file(
    filepath: str | Path | None,
    backend: ProbeBackend | None = None,
    settings: GeometrySettings | None = None,
) -> Geometry:
    """Geometry of an image file on disk.

    Raises:
        NotIdentifiableError: If the probe reports nothing usable
        CommandNotFoundError: If the identify backend is selected but missing
    """
    report = probe_dimensions(filepath, backend=backend, settings=settings)
    return Geometry.from_dimensions_probe(report, source=str(filepath))
