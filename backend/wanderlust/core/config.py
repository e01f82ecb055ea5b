"""
Core configuration module for the Wanderlust Tours API.
Settings are read from environment variables and an optional .env file.
"""

from pydantic_settings import BaseSettings
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Defaults are suitable for local development.
    """

    # Application
    app_name: str = "Wanderlust Tours API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # API Configuration
    api_prefix: str = "/api"
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_workers: int = 1  # state is in-process; more workers means separate stores

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # text | json

    # CORS
    cors_origins: list = ["http://localhost:5000", "http://127.0.0.1:5000", "http://localhost:5173"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list = ["Content-Type", "Accept"]

    # Rate limiting
    rate_limit_enabled: bool = True
    submission_rate_limit: str = "20/minute"
    health_rate_limit: str = "1000/minute"

    # Simulated email notifications for inquiries, contact messages, signups
    notifications_enabled: bool = True
    notification_recipient: str = "bookings@wanderlust-tours.example"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
