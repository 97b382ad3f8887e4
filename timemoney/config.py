"""Application configuration using Pydantic Settings."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEMONEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    state_path: Path = Path.home() / ".time-is-money" / "state.json"
    storage_key: str = "time-is-money-state"

    # Defaults for a fresh state
    default_currency: str = "USD"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None


settings = Settings()
