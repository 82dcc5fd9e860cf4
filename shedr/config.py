# App configuration using Pydantic BaseSettings (loads from .env or defaults).
# Engine functions take explicit arguments; only the API / CLI adapters read these.

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    UPCOMING_LIMIT: int = 3
    REMINDER_LEAD_MINUTES: int = 30
    SUBURB_SEARCH_LIMIT: int = 5
    LOG_LEVEL: str = "INFO"

    SCHEDULES_CSV: str | None = None
    SUBURBS_CSV: str | None = None

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SHEDR_", extra="ignore")


settings = Settings()
