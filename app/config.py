from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Product Catalog API"
    ENVIRONMENT: str = "local"
    API_PREFIX: str = "/api/v1"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./catalog.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Security
    # ==============================
    API_TOKENS: Optional[str] = None
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: Optional[str] = None
    JWT_ISSUER: Optional[str] = None

    # ==============================
    # Pagination
    # ==============================
    DEFAULT_PER_PAGE: int = 15
    MAX_PER_PAGE: int = 100


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
