"""
Configuration management for the Contribution Finder service.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # GitHub OAuth App credentials (checked per request, not at startup)
    github_client_id: Optional[str] = None
    github_client_secret: Optional[str] = None
    frontend_url: str = "http://localhost:5174"

    # GitHub endpoints
    github_oauth_base_url: str = "https://github.com/login/oauth"
    github_api_base_url: str = "https://api.github.com"
    oauth_scope: str = "read:user"
    request_timeout: float = 30.0

    # Discovery configuration
    search_per_page: int = Field(20, ge=1, le=100)
    star_lookup_limit: int = Field(5, ge=1)
    star_cache_ttl: int = Field(3600, ge=0)

    # Database Configuration
    database_url: str = "sqlite:///./contribfinder.db"

    # Application Configuration
    app_host: str = "0.0.0.0"
    app_port: int = 3002
    app_debug: bool = False
    cors_origins: str = "*"

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def github_configured(self) -> bool:
        """True when both OAuth credentials are present."""
        return bool(self.github_client_id and self.github_client_secret)

    @property
    def allowed_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency function returning the active settings."""
    return settings
