"""Configuration management using pydantic-settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "whispher-patterns"

    # Pattern defaults (the frontend renders gallery cards at 800x600)
    default_width: float = Field(800, gt=0)
    default_height: float = Field(600, gt=0)
    default_emotion: str = "calm"
    max_dimension: float = Field(4096, gt=0)

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
