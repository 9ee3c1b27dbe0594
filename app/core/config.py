"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (API prefix, store latency, etc.)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to"
    )
    PORT: int = Field(
        default=3000,
        description="Port the HTTP server listens on"
    )

    # In-memory store
    STORE_LATENCY_SECONDS: float = Field(
        default=0.05,
        description="Simulated latency of every store operation"
    )
    STORE_CONNECT_LATENCY_SECONDS: float = Field(
        default=0.1,
        description="Simulated latency of store connect (disconnect takes half)"
    )
    SEED_SAMPLE_USERS: bool = Field(
        default=True,
        description="Seed the store with two sample users on construction"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    SLOW_REQUEST_SECONDS: float = Field(
        default=5.0,
        description="Requests slower than this are logged as warnings"
    )

    @validator("STORE_LATENCY_SECONDS", "STORE_CONNECT_LATENCY_SECONDS")
    def validate_latency(cls, v):
        """Latency is a sleep duration, so it cannot be negative."""
        if v < 0:
            raise ValueError("Store latency must not be negative")
        return v

    @validator("DEBUG")
    def validate_debug(cls, v, values):
        """Debug mode leaks exception details, keep it out of production."""
        if values.get("ENVIRONMENT") == "production" and v:
            raise ValueError("DEBUG must be disabled in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.API_PREFIX.startswith("/"):
        errors.append("API_PREFIX must start with '/'")

    if settings.API_PREFIX.endswith("/"):
        errors.append("API_PREFIX must not end with '/'")

    if not 0 < settings.PORT < 65536:
        errors.append("PORT must be between 1 and 65535")

    if settings.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"LOG_LEVEL '{settings.LOG_LEVEL}' is not a valid level")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
