"""
Configuration management for the GitWrap API.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    For nested settings, use double underscore: CORS__ALLOW_ORIGINS="http://localhost:3000"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "GitWrap API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root logging level")

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8000",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:8000",
        ],
        description="Allowed CORS origins. Set to ['*'] for development.",
    )
    cors_allow_methods: list[str] = ["GET", "HEAD", "OPTIONS"]
    cors_allow_headers: list[str] = ["Accept", "Accept-Encoding", "Content-Type"]
    cors_allow_credentials: bool = False
    cors_expose_headers: list[str] = ["X-Process-Time"]

    # ==========================================================================
    # GitHub
    # ==========================================================================
    github_token: Optional[str] = Field(
        default=None,
        description="Service credential for the GitHub API (preferred)",
    )
    github_personal_access_token: Optional[str] = Field(
        default=None,
        description="Fallback personal access token",
    )
    github_api_base: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    github_user_agent: str = "GitWrap"
    github_timeout: float = Field(default=10.0, gt=0, description="Per-call timeout (seconds)")
    request_deadline: float = Field(
        default=25.0,
        gt=0,
        description="Overall deadline for one aggregation (seconds)",
    )
    commit_fetch_concurrency: int = Field(default=10, ge=1, le=10)

    @computed_field
    @property
    def github_auth_token(self) -> str:
        """Get the effective GitHub token, service credential first."""
        return (self.github_token or self.github_personal_access_token or "").strip()

    # ==========================================================================
    # Wrapped
    # ==========================================================================
    default_year: int = Field(default=2025, description="Year shown when none is requested")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def setup_logging(level: str | None = None) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, (level or get_settings().log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
