from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from tempconv.models.conversion import ConversionDirection


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    config_dir: str = "~/.config/tempconv"
    history_backend: Literal["file", "keyring", "memory"] = "file"
    history_file: str | None = None
    default_direction: ConversionDirection = ConversionDirection.TO_FAHRENHEIT
    output_format: Literal["rich", "json", "quiet"] | None = None

    @property
    def history_path(self) -> Path:
        """Resolved location of the JSON history file."""
        if self.history_file:
            return Path(self.history_file).expanduser()
        return Path(self.config_dir).expanduser() / "history.json"
