"""Global settings loaded from environment variables via pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CS50VIDEOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Secret, read from the unprefixed YOUTUBE_API_KEY
    youtube_api_key: str = Field(default="", validation_alias="YOUTUBE_API_KEY")
    log_dir: str = "./data/logs"
    proxy_url: str = ""
    http_timeout: float = 30.0
