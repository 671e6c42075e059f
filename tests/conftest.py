"""Test configuration and fixtures for cl_geometry.

This module provides:
- Pytest configuration (markers, dependency checks)
- Settings isolation (environment and cached settings reset per test)
- Generated sample images
"""

import os
import shutil
from pathlib import Path

import pytest
from PIL import Image

from cl_geometry.config import ENV_PREFIX, reset_settings

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_imagemagick: requires ImageMagick's identify to be installed",
    )


def pytest_runtest_setup(item):
    """Skip tests whose external tools are not installed."""
    if item.get_closest_marker("requires_imagemagick") and not shutil.which("identify"):
        pytest.skip(
            "ImageMagick not installed. "
            "Install: brew install imagemagick (macOS) or apt-get install imagemagick (Linux)\n"
            "Or exclude with: pytest -m 'not requires_imagemagick'"
        )


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop CL_GEOMETRY_* variables and cached settings around every test."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_png(tmp_path: Path) -> Path:
    """A 434x66 PNG, the shape used throughout the geometry tests."""
    path = tmp_path / "5k.png"
    Image.new("RGB", (434, 66), (200, 120, 40)).save(path)
    return path


@pytest.fixture
def not_an_image(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("this is not an image", encoding="utf-8")
    return path
