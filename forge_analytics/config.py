# Forge Analytics Configuration
"""
Configuration management for Forge Analytics.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Forge Analytics settings."""

    # Service settings
    service_name: str = "Forge Analytics"
    service_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8002
    cors_origins: list[str] = ["*"]

    # Persistence; projects are kept in memory when unset
    database_url: Optional[str] = None

    # Dashboard widget defaults
    dashboard_title: str = "Forge Analytics"
    company_name: str = "Your Company"
    welcome_message: str = "Welcome to your advanced analytics workspace"
    tagline: str = "Data-driven insights for tomorrow"

    # Limits
    max_projects: int = 999

    # Synthetic data; set for reproducible charts
    random_seed: Optional[int] = None

    class Config:
        env_prefix = "FORGE_ANALYTICS_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
