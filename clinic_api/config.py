"""
clinic_api/config.py — Application-wide configuration using Pydantic Settings.

All values are loaded from environment variables (.env file in development).
The listening port follows the conventional PORT variable and defaults to 3000.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "data" / "seed.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Application ──────────────────────────────────────────────────────────
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False
    cors_origins: list[str] = Field(default=["*"])

    # ── HTTP server ──────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    api_prefix: str = "/api/v1"

    # ── Seed data ────────────────────────────────────────────────────────────
    #   Read once per process; runtime changes are never written back.
    seed_path: Path = DEFAULT_SEED_PATH

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance — use this everywhere instead of Settings()."""
    return Settings()
