"""Application configuration."""

import os
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    display_timezone: str = "Asia/Kolkata"
    default_avg_per_day: float = 10.0
    save_cooldown_seconds: int = 10
    health_fact_interval_seconds: int = 8
    recent_entries_limit: int = 5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def timezone(self) -> ZoneInfo:
        """Zone used to decide which calendar day an entry belongs to."""
        return ZoneInfo(self.display_timezone)
