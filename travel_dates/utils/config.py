"""Configuration management using Pydantic Settings."""

import os
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Configuration
    environment: str = "development"
    log_level: str = "INFO"

    # Localization (display labels only, tokens are always English)
    default_locale: str = "en"
    supported_locales: List[str] = ["en", "ar"]

    # Session store
    max_sessions: int = 1000

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",  # Local development
        "http://localhost:3001",
    ]

    class Config:
        """Pydantic configuration."""
        env_file = os.path.join(os.path.dirname(__file__), "..", ".env")
        env_prefix = "TRAVEL_DATES_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
