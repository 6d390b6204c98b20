"""
Centralized configuration for the FoodShare backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., MONGO_*, JWT_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "FoodShare API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "foodshare"
    mongo_timeout_ms: int = 5000
    mongo_connect_retries: int = 3
    mongo_retry_backoff_seconds: float = 1.0  # doubled after each failed attempt

    # Auth gate
    auth_strategy: Literal["token", "api_key"] = "token"
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    api_key: str = ""
    api_key_header: str = "x-api-key"
    bcrypt_rounds: int = 12

    # Listings
    page_size: int = 50
    default_radius_km: float = 5.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
