"""Configuration loading for tetpitch.

Reads environment variables into a typed settings object using Pydantic v2.

Env variables:
- TET_LOG_LEVEL (default: INFO)
- TET_PRECISION (single | double, default: double)
- TET_REFERENCE_PITCH (default: 27.5, the A0 frequency in Hz)
- TET_TONE_COUNT (default: 12)
- TET_ENV (default: development)
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    TET_LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    TET_PRECISION: Literal["single", "double"] = Field(
        default="double", description="Floating-point precision of pitch values"
    )
    TET_REFERENCE_PITCH: float = Field(
        default=27.5, gt=0, description="Seed frequency in Hz for default streams"
    )
    TET_TONE_COUNT: int = Field(
        default=12, gt=0, description="Equal divisions of the octave"
    )
    TET_ENV: str = Field(default="development", description="Environment name")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment and memoize.

    Raises:
        ValueError: if an environment variable holds an invalid value.
    """

    env = {
        "TET_LOG_LEVEL": os.getenv("TET_LOG_LEVEL", "INFO"),
        "TET_PRECISION": os.getenv("TET_PRECISION", "double").lower(),
        "TET_REFERENCE_PITCH": os.getenv("TET_REFERENCE_PITCH", "27.5"),
        "TET_TONE_COUNT": os.getenv("TET_TONE_COUNT", "12"),
        "TET_ENV": os.getenv("TET_ENV", "development"),
    }

    return Settings.model_validate(env)


__all__ = ["Settings", "get_settings"]
