"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Chat bot command settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BOT_", extra="ignore")

    name: str = "Bot Educativo"
    prefix: str = "!"
    help_command: str = "ayuda"

    # JSON lists in env, e.g. BOT_ADMIN_IDS='["123", "456"]'
    admin_ids: list[str] = []
    admin_channel_ids: list[str] = []


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    bot: BotSettings = BotSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
