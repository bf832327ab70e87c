from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PRICING_", env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Product Pricing API"

    # ==============================
    # Product store
    # ==============================
    STORE: Literal["memory", "json"] = "memory"
    DATA_DIR: str = "data"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # HTTP
    # ==============================
    API_URL: Optional[str] = None
    HOST: str = "127.0.0.1"
    PORT: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
