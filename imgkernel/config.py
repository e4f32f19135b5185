"""
Configuration for imgkernel.

Settings are read from environment variables prefixed with ``IMGKERNEL_``;
nested sections use ``__`` as a delimiter, e.g.
``IMGKERNEL_PROCESSING__HUE_WRAP=true``.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imgkernel.core.constants import SystemConstants
from imgkernel.core.enums import BoundsPolicy


class SystemSettings(BaseModel):
    """Logging and diagnostics settings."""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Root log level")
    log_format: str = Field(default=SystemConstants.LOG_FORMAT, description="Log record format")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ProcessingSettings(BaseModel):
    """Defaults for numeric processing behavior."""

    hue_wrap: bool = Field(
        default=False,
        description="Reduce hue modulo 1 before HSV->RGB instead of failing on overflow",
    )
    bounds_policy: BoundsPolicy = Field(
        default=BoundsPolicy.STRICT,
        description="Write-bounds policy for new pixel buffers (strict/lenient)",
    )


class Settings(BaseSettings):
    """Top-level imgkernel settings."""

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: Settings = None) -> None:
    """
    Configure root logging for a driver program.

    The library itself never installs handlers; call this from application code.

    Args:
        settings: Settings to use (defaults to get_settings())
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=settings.system.log_format,
    )
