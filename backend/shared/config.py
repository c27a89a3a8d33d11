"""
Centralized configuration for the CRM backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., TOKEN_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Optional
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

    # Application
    app_name: str = "CRM API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Authentication
    secret_key: str = ""
    token_header: str = "Authorization"
    token_scheme: Optional[str] = None  # e.g. "Bearer"; unchecked when unset
    password_hash_rounds: int = Field(default=8, ge=4, le=31)

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    users_table: str = "users"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
