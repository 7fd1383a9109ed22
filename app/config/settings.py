"""Application configuration settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Track Workout Generator"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./tracks.db"
    database_echo: bool = False

    # Generator
    generator_seed: int | None = None  # Fix rep-scheme and skill picks for reproducible output
    max_week_count: int = 52  # Largest week_count accepted in a single request

    # Logging
    log_json: bool = True  # JSON lines when True, console renderer otherwise

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
