"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Command table
    config_path: str = "config.json"

    # Slack (overrides slack_token from the command table when set)
    slack_bot_token: str = ""

    # Outbound task calls
    outbound_timeout_seconds: float = 10.0

    # App
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8081


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
