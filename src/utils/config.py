"""Application configuration.

Loaded from .env and SMIL_* environment variables.
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="SMIL_")

    animation_id_prefix: str = "smil-anim-"
    trigger_id_prefix: str = "smil-trigger-"
    strict_triggers: bool = False  # fail instead of emitting a placeholder begin
    log_level: str = "INFO"


settings = Settings()
