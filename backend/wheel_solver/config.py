"""Solver service configuration."""
import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List


class Settings(BaseSettings):
    """Service settings read from WHEEL_* environment variables."""

    app_name: str = "Rotary Wheel Solver"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # JSON array in the environment, e.g. WHEEL_CORS_ORIGINS='["http://localhost:3000"]'
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    threshold: int = Field(default=6, ge=1, description="Strength at which active tiles die")
    gesture_run_cap: int = Field(default=3, ge=1, description="Rotation steps per gesture")
    # Search cost grows steeply with regions: 6 regions already visit ~17k states,
    # 8 regions with long countdowns can tie up a worker for a long time
    max_regions: int = Field(default=7, ge=1, description="Largest board the API will solve")

    model_config = SettingsConfigDict(
        env_prefix="WHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (rebuilt on every call in debug mode)."""
    global _settings
    if _settings is None or os.getenv("WHEEL_DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
