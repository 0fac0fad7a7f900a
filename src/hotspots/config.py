"""
Configuration management for the Hotspots API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    # Firebase Realtime Database
    fb_prod_db_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FB_PROD_DB_URL", "HOTSPOTS_FB_PROD_DB_URL"),
    )
    fb_dev_db_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FB_DEV_DB_URL", "HOTSPOTS_FB_DEV_DB_URL"),
    )
    fb_auth_token: str | None = None  # Appended as ?auth= to REST reads
    firebase_credentials_path: str | None = None
    firebase_credentials_json: str | None = None
    firebase_app_name: str = "hotspots"

    # Store backend: 'firebase' or 'memory'
    store_backend: str = "firebase"

    # REST reads have no timeout unless one is configured
    http_timeout: float | None = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "HOTSPOTS_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def base_db_url(self) -> str | None:
        """Database root URL for the current runtime mode."""
        url = self.fb_prod_db_url if self.is_production else self.fb_dev_db_url
        if not url:
            return None
        return url.rstrip("/")


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        store_backend=settings.store_backend,
        base_db_url=settings.base_db_url,
    )
