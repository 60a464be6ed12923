"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Controle de Gastos"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/controle_gastos.sqlite"
    db_pool_size: int = 5
    db_max_overflow: int = 0
    db_pool_timeout: int = 10  # seconds to wait for a free connection

    # Auth
    jwt_secret: str = "change-me-in-production-0123456789abcdef"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
