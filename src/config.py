"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./blog.db")

    # JWT (no default secret: startup fails without one)
    jwt_secret: str
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=120, gt=0)  # 2 hours

    # Auth cookie
    cookie_secure: bool = Field(default=False)
    login_redirect: str = Field(default="/willkommen")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, value: str) -> str:
        """Reject an empty signing secret."""
        if not value.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return value

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if len(self.jwt_secret) < 32:
                raise ValueError("JWT_SECRET must be at least 32 characters in production")
            if self.database_url.startswith("sqlite"):
                raise ValueError("DATABASE_URL should not use SQLite in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
