"""Pillow-based dimension probe, for hosts without ImageMagick."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....geometry.errors import NotIdentifiableError


def pillow_probe(filepath: str | Path) -> str:
    """Return ``"{width}x{height}"`` of the first frame, or ``""`` if unreadable.

    Raises:
        NotIdentifiableError: If ``filepath`` does not exist
    """
    path = Path(filepath)
    if not path.exists():
        raise NotIdentifiableError(f"Cannot find the geometry of a missing file: {path}")

    try:
        with Image.open(path) as img:
            width, height = img.size
    except OSError as exc:
        logger.error(f"Pillow cannot identify {path}: {exc}")
        return ""
    return f"{width}x{height}"
