# File: hyprtune/config/app_config.py
"""Application-wide constants and runtime settings."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_NAME: str = "hyprtune"
CONFIG_ENV_VAR: str = "HYPRTUNE_CONFIG"
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_path() -> Path:
    """Resolves the appearance config path from the environment or the Hyprland default."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "hypr" / "source" / "appearance.conf"


class AppSettings(BaseModel):
    """Settings for a single hyprtune invocation, built from CLI options."""

    model_config = ConfigDict(frozen=True)

    config_path: Path = Field(
        default_factory=default_config_path,
        description="Path to the Hyprland appearance config being edited.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL, description="Root logging level name."
    )
    log_file: Path | None = Field(
        default=None, description="Optional file that receives log output."
    )

    @field_validator("config_path", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}'. Choose one of: {', '.join(LOG_LEVELS)}"
            )
        return level
