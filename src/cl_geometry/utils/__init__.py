"""Utility helpers - logging setup and profiling."""

from .logging import configure_logging
from .profiling import timed

__all__ = ["configure_logging", "timed"]
