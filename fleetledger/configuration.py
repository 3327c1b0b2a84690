"""Mini README: Centralised configuration models and helpers for the fleet ledger.

Structure:
    * FleetSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FLEET_*`` environment variables (or a
    local ``.env`` file) for the snapshot location and logging level. Command
    line options passed to ``fleet_management.py`` take precedence over these
    values. The settings are cached so validation happens once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class FleetSettings(BaseSettings):
    """Runtime configuration for the fleet management program."""

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label used when reporting start-up details.",
    )
    snapshot_path: Path = Field(
        Path("FleetData.json"),
        description="File the fleet snapshot is read from and written to.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level for messages written to stderr.",
    )

    @field_validator("snapshot_path", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories without touching the file system."""

        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        """Accept standard logging level names in any casing."""

        normalised = value.strip().upper()
        if normalised not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> FleetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FleetSettings()
