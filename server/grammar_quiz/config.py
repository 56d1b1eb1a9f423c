from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application configuration settings"""

    # Application
    app_name: str = "Grammar Quiz Grader"
    debug: bool = False
    api_version: str = "v1"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Notification channel (Telegram bot API)
    notify_bot_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("notify_bot_token", "telegram_bot_token"),
    )
    notify_chat_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("notify_chat_id", "telegram_chat_id"),
    )
    notify_api_base: str = "https://api.telegram.org"
    notify_timeout: float = 10.0

    @property
    def notify_enabled(self) -> bool:
        """Both the bot token and the chat target must be set"""
        return bool(self.notify_bot_token) and bool(self.notify_chat_id)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
