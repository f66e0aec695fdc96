"""
Runtime configuration helpers for the Bites viewer service.

Loads overrides from the .env file located in the project root; values
already present in the environment take precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    app_name: str = Field(default="Bites Viewer", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")

    # Playback clock
    tick_interval_ms: int = Field(default=100, gt=0, alias="VIEWER_TICK_INTERVAL_MS")

    # Session registry
    max_sessions: int = Field(default=256, gt=0, alias="VIEWER_MAX_SESSIONS")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000

    @property
    def ticks_per_second(self) -> float:
        return 1000 / self.tick_interval_ms


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
