"""Runtime settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Price feed and retry configuration."""

    model_config = SettingsConfigDict(env_prefix="WALLET_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    prices_url: str = Field(
        default="https://interview.switcheo.com/prices.json",
        description="JSON price feed: array of {currency, date, price}",
    )
    fetch_timeout: float = 10.0
    fetch_max_retries: int = Field(default=3, ge=1)
    fetch_initial_backoff: float = Field(default=1.0, ge=0)
    fetch_max_backoff: float = Field(default=8.0, ge=0)
    price_max_age_days: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
