"""
Configuration management for the MyTravel planner service.
Supports an in-process mock booking collaborator or a remote booking API.
"""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Booking Collaborator
    booking_provider: Literal["mock", "http"] = "mock"
    booking_api_base_url: str = "http://localhost:5000"
    booking_api_timeout: float = 10.0

    # Session Persistence
    session_backend: Literal["memory", "file"] = "memory"
    session_dir: str = ".sessions"

    # Display
    currency: str = "MYR"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_booking_config() -> dict:
    """Get booking collaborator configuration based on provider."""
    config = {
        "provider": settings.booking_provider,
        "timeout": settings.booking_api_timeout,
    }

    if settings.booking_provider == "http":
        config["base_url"] = settings.booking_api_base_url.rstrip("/")

    return config
