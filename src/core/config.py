"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Ambient knobs only (log level, text codec, summary output); the command line
  contract (-f/-e/paths) never depends on them.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "lice"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking into the Core.
    - One configuration contract shared by the CLI and the services.
    """

    model_config = SettingsConfigDict(
        env_prefix="LICE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for lice.* loggers (DEBUG, INFO, WARNING, ...).",
    )
    file_encoding: str | None = Field(
        default=None,
        description="Codec for license and source files; None uses the platform default.",
    )
    show_summary: bool = Field(
        default=True,
        description="Print the outcome table once the run finishes.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("file_encoding", mode="before")
    @classmethod
    def _blank_encoding_is_default(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings() -> AppSettings:
    """Settings from env vars, the project `.env` and the user's `.env`.

    Later files win: a project `.env` overrides the user's global one, and
    real environment variables override both.
    """

    return AppSettings(_env_file=(get_user_env_file(), ".env"))
