"""
Configuration management for buildlink.

Provides the convention defaults used when seeding software models, along with
logging settings and environment variable overrides.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class ConventionDefaults(BaseModel):
    """Default values installed on unset model properties."""

    min_sdk: int = Field(default=21, ge=1, description="Default minimum Android SDK")
    target_sdk: int = Field(default=34, ge=1, description="Target SDK forced by NiA support")
    desugaring_jdk_threshold: int = Field(
        default=8,
        ge=1,
        description="Desugaring is enabled by default when the JDK version exceeds this",
    )
    desugar_lib_version: str = Field(default="2.0.4", description="desugar_jdk_libs version")
    serialization_version: str = Field(default="1.6.3", description="kotlinx-serialization version")
    room_version: str = Field(default="2.6.1", description="Room version")
    hilt_version: str = Field(default="2.50", description="Hilt version")
    jacoco_version: str = Field(default="0.8.7", description="JaCoCo tool version")


class Config(BaseModel):
    """Root configuration for buildlink."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    conventions: ConventionDefaults = Field(default_factory=ConventionDefaults)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        defaults = ConventionDefaults()
        return cls(
            log_level=os.environ.get("BUILDLINK_LOG_LEVEL", "INFO"),  # type: ignore
            conventions=ConventionDefaults(
                min_sdk=int(os.environ.get("BUILDLINK_MIN_SDK", str(defaults.min_sdk))),
                desugar_lib_version=os.environ.get(
                    "BUILDLINK_DESUGAR_LIB_VERSION", defaults.desugar_lib_version
                ),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
