"""
Configuration settings for the Game Revenue Estimator.

Uses Pydantic Settings to load environment variables for the external
collaborators (game catalog, developer registry, player-count provider),
logging, and the synthetic projection model.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Collaborators
    catalog_base_url: str = Field("https://grm.gameops.tech/games", alias="CATALOG_BASE_URL")
    player_series_base_url: str = Field(
        "https://steamcharts.com", alias="PLAYER_SERIES_BASE_URL"
    )
    http_timeout_seconds: float = Field(10.0, alias="HTTP_TIMEOUT_SECONDS")
    http_retry_attempts: int = Field(3, alias="HTTP_RETRY_ATTEMPTS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Synthetic projection
    variation_low: float = Field(0.8, alias="VARIATION_LOW")
    variation_high: float = Field(1.2, alias="VARIATION_HIGH")
    synthetic_months: int = Field(12, alias="SYNTHETIC_MONTHS")
    random_seed: Optional[int] = Field(None, alias="RANDOM_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def variation(self) -> tuple[float, float]:
        return (self.variation_low, self.variation_high)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
