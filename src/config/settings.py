"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote API configuration
    api_base_url: str = "http://localhost:8000"
    register_path: str = "/api/v1/auth/register"
    upload_image_path: str = "/api/v1/auth/upload-image"
    http_timeout_seconds: float = 10.0  # Bounds upload and registration waits

    # Signup settings
    default_avatar_url: str = "/assets/default-avatar.jpg"
    success_path: str = "/dashboard"

    # Session cookie settings
    token_cookie_secure: bool = False  # Set True behind HTTPS


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
