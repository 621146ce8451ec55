"""
Configuration management for the Artisan Geo service.

Uses pydantic-settings for environment variable loading with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Artisan Geo service configuration."""

    # Database
    database_path: str = "./artisan_geo.db"

    # Server options
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Search
    max_radius_km: float = 100
    default_radius_km: float = 10
    max_results: int = 50

    model_config = {
        "env_prefix": "ARTISAN_GEO_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
