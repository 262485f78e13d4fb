"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    telegram_bot_token: str
    supabase_url: str
    supabase_service_key: str
    wikimapia_api_key: str
    wikimapia_base_url: str = "http://api.wikimapia.org/"
    nearby_count: int = 9
    photo_limit: int = 3
    analytics_token: str | None = None
    analytics_url: str = "https://api.botan.io/track"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
