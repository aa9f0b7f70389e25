from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized backend configuration with type validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Score validation
    high_risk_threshold: int = Field(default=15, ge=1, le=25)
    min_control_measures: int = Field(default=3, ge=1, le=20)
    residual_reduction: int = Field(default=2, ge=1, le=24)

    # Compliance checks
    ppe_required_threshold: int = Field(default=6, ge=1, le=25)
    min_activity_length: int = Field(default=10, ge=1, le=500)

    # Equipment classification
    classifier_cache_size: int = Field(default=512, ge=1, le=100000)

    # API cache
    cache_ttl_seconds: int = Field(default=300, ge=10, le=86400)
    cache_max_size: int = Field(default=100, ge=1, le=10000)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Cached singleton so .env is not re-read on every request."""
    return Settings()


settings = get_settings()
