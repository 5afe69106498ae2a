"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-jwt-secret-change-in-production"
DEFAULT_ADMIN_PASSWORD = "admin123"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage
    storage_backend: Literal["json", "sql"] = "json"
    data_file: str = "data/homepage.json"
    database_url: str = "sqlite+aiosqlite:///data/homepage.db"

    # Security secrets
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    environment: str = "development"

    # Session tokens
    token_expire_days: int = 7

    # Initial admin account, only used when the store has no account yet
    admin_username: str = "admin"
    admin_password: str = DEFAULT_ADMIN_PASSWORD

    # CORS
    cors_origins: str = "http://localhost:5173"

    # Rate limiting
    login_rate_limit: str = "10/15minutes"

    # Logging
    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins, filtering empty strings."""
        if not self.cors_origins:
            return ["http://localhost:5173"]
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins if origins else ["http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


def validate_security_settings() -> None:
    """Ensure insecure defaults are never used in production-like environments."""
    if settings.environment.lower() not in {"production", "prod"}:
        return

    if settings.jwt_secret == DEFAULT_JWT_SECRET:
        raise RuntimeError(
            "Insecure default secrets are configured for production: JWT_SECRET. "
            "Set a strong value in the environment before starting the API."
        )
