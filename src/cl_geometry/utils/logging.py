"""Loguru sink setup for applications embedding cl_geometry."""

import sys

from loguru import logger

from ..config import get_settings


def configure_logging(level: str | None = None) -> int:
    """Replace loguru's sinks with a single stderr sink.

    Args:
        level: Minimum level; defaults to ``GeometrySettings.log_level``

    Returns:
        The loguru handler id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or get_settings().log_level).upper())
