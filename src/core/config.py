"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the same values. The filesystem layout is deliberately absent
from here: it is a fixed convention (see `core.layout`).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "binstage"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "binstage"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "binstage"
    return Path.home() / ".config" / "binstage"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Order of precedence: environment, project `.env`, then the user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="BINSTAGE_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    cargo: str = Field(
        default="cargo",
        min_length=1,
        description="Toolchain executable used for `build`.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
