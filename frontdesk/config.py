"""
Application configuration using Pydantic Settings
"""

from decimal import Decimal
from typing import List
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database (used by the SQL record store)
    database_url: str = "sqlite+aiosqlite:///./frontdesk.db"
    database_echo: bool = False

    # Record storage
    storage_backend: str = "sql"  # sql, http
    storage_url: str = "http://localhost:8080/api"
    storage_api_key: str = ""
    storage_timeout_seconds: float = 10.0

    # Billing
    tax_rate: Decimal = Decimal("0.10")

    # Dashboard
    dashboard_recent_limit: int = 5

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    cors_origins: str = "http://localhost:5173"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json, console

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "FRONTDESK_"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
