"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from cl_geometry.config import GeometrySettings, get_settings, reset_settings


class TestGeometrySettings:
    def test_defaults(self) -> None:
        settings = GeometrySettings()
        assert settings.identify_binary == "identify"
        assert settings.probe_backend == "identify"
        assert settings.probe_timeout == 30.0
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CL_GEOMETRY_IDENTIFY_BINARY", "/opt/im/bin/identify")
        monkeypatch.setenv("CL_GEOMETRY_PROBE_BACKEND", "pillow")
        monkeypatch.setenv("CL_GEOMETRY_PROBE_TIMEOUT", "2.5")

        settings = GeometrySettings.from_env()

        assert settings.identify_binary == "/opt/im/bin/identify"
        assert settings.probe_backend == "pillow"
        assert settings.probe_timeout == 2.5

    def test_invalid_backend_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CL_GEOMETRY_PROBE_BACKEND", "exiftool")
        with pytest.raises(ValidationError):
            _ = GeometrySettings.from_env()

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ = GeometrySettings(probe_timeout=0)


class TestGetSettings:
    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CL_GEOMETRY_LOG_LEVEL", "DEBUG")
        assert get_settings() is first

        reset_settings()
        assert get_settings().log_level == "DEBUG"
