"""Configuration management for dok."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UPDATE_BASE_URL = "https://raw.githubusercontent.com/Kiri23/dev-toolkit/main/denoDevToolkit"
SWARM_SERVICE_LABEL = "com.docker.swarm.service.name"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DOK_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Docker
    docker_bin: str = Field(default="docker", description="Docker CLI executable")
    swarm_label: str = Field(default=SWARM_SERVICE_LABEL, description="Label marking Swarm task containers")

    # Self-update
    update_base_url: str = Field(default=DEFAULT_UPDATE_BASE_URL, description="Base URL serving dok binaries")
    update_timeout_seconds: int = Field(default=60, description="Download timeout in seconds")
    install_path: Optional[Path] = Field(None, description="Executable replaced by `dok update`")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")


def get_settings() -> Settings:
    """Load settings from the environment and an optional `.env` file."""

    return Settings()
