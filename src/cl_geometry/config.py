"""Runtime settings, read from ``CL_GEOMETRY_*`` environment variables."""

import os
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "CL_GEOMETRY_"

ProbeBackend = Literal["identify", "pillow"]


class GeometrySettings(BaseModel):
    """Settings for the dimension probe and logging.

    Attributes:
        identify_binary: ImageMagick ``identify`` executable name or path
        probe_backend: Which probe ``geometry_from_file`` uses by default
        probe_timeout: Seconds to wait for the probe command
        log_level: Level for the stderr sink installed by ``configure_logging``
    """

    identify_binary: str = Field(default="identify", min_length=1)
    probe_backend: ProbeBackend = "identify"
    probe_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(cls) -> "GeometrySettings":
        values = {
            name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in cls.model_fields
        }
        return cls.model_validate({k: v for k, v in values.items() if v is not None})


_settings: GeometrySettings | None = None


def get_settings() -> GeometrySettings:
    """Return the process-wide settings, loading them from the environment once."""
    global _settings

    if _settings is None:
        _settings = GeometrySettings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings()`` re-reads the environment."""
    global _settings
    _settings = None
