"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8082
    cors_origins: list[str] = ["*"]

    # Connection profiles
    connections_file: str = "connections.json"

    # MongoDB timeouts
    connect_timeout_seconds: float = 10.0
    operation_timeout_seconds: float = 5.0
    drop_timeout_seconds: float = 10.0

    # Document pagination
    default_page_size: int = Field(20, ge=1)
    max_page_size: int = Field(100, ge=1)

    # Logging
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
