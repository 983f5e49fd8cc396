# bookstore/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Book API"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    # "length": id = len(collection) + 1, as the reference server does.
    # "next": id = max(existing ids) + 1, never reuses an id still in use.
    id_strategy: Literal["length", "next"] = "length"

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_", env_file=".env", extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings from ``BOOKSTORE_*`` environment variables.
    """
    return Settings()
