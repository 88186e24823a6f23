"""Application configuration — loaded from environment variables."""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "instance-finder"
CACHE_FILE_NAME = "instances_cache.json"


def get_app_data_dir() -> Path:
    """Per-user application data directory (cross-platform, no extra dependency)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".local" / "share" / APP_DIR_NAME


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="INSTANCE_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = "https://instances.social/api/1.0"
    http_timeout_seconds: float = Field(default=20.0, gt=0)
    user_agent: str = "instance-finder/0.1.0"

    cache_dir: Path = Field(default_factory=get_app_data_dir)
    cache_ttl_hours: int = Field(default=24, gt=0)
    # Debug builds never read or write the snapshot.
    debug: bool = False

    default_max_results: int = Field(default=200, gt=0)
    language_sample_size: int = Field(default=500, gt=0)

    keyring_service: str = "org.instances.finder"
    keyring_username: str = "instances_social_token"

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8765

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / CACHE_FILE_NAME


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
