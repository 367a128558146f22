"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=1440)  # 24 hours

    # CORS
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "https://run-tracker-front.onrender.com",
        ]
    )

    # Photo uploads
    upload_dir: str = Field(default="uploads")
    upload_url_prefix: str = Field(default="/uploads")
    max_upload_bytes: int = Field(default=5 * 1024 * 1024)

    # Storage: "memory" keeps runs in process, "database" uses SQLAlchemy
    storage_backend: str = Field(default="memory", pattern="^(memory|database)$")
    database_url: str = Field(default="sqlite:///./run_tracker.db")

    # Seed data
    seed_user_email: str = Field(default="test@example.com")
    seed_user_password: str = Field(default="password123")
    seed_demo_runs: bool = Field(default=True)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def uses_database(self) -> bool:
        """Check if runs and users are stored through SQLAlchemy."""
        return self.storage_backend == "database"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
