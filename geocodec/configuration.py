"""Mini README: Centralised configuration model and accessor for geocodec.

Structure:
    * GeocodecSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The CLI reads ``get_settings`` to pick the logging level and the
    indentation used when printing canonical JSON. Values can be supplied via
    ``GEOCODEC_*`` environment variables or a local ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class GeocodecSettings(BaseSettings):
    """Runtime configuration for geocodec tooling."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the logging level applied to the root logger.",
    )
    json_indent: Optional[int] = Field(
        2,
        description="Indentation used when printing canonical JSON. Unset for compact output.",
        ge=0,
    )

    class Config:
        env_prefix = "GEOCODEC_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept any casing and reject names unknown to ``logging``."""

        name = str(value).strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return name

    @property
    def numeric_log_level(self) -> int:
        """Return the ``logging`` constant matching ``log_level``."""

        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> GeocodecSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GeocodecSettings()
