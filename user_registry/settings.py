from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - USER_REGISTRY_LOG_LEVEL (optional; WARNING keeps the menu output clean)
    # - USER_REGISTRY_SEED_DEMO (optional; start the menu with the demo users loaded)
    log_level: str = Field(default="WARNING", validation_alias="USER_REGISTRY_LOG_LEVEL")
    seed_demo: bool = Field(default=False, validation_alias="USER_REGISTRY_SEED_DEMO")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return (value or "WARNING").strip().upper()


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(); tests
    monkeypatch it.
    """
    return Settings()
