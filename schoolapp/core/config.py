"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://127.0.0.1:27017"
    mongodb_db: str = "schoolApp"

    # JWT Auth (one secret signs and verifies; SECRET_KEY still honoured)
    jwt_secret_key: str = Field(
        "default_secret_key",
        validation_alias=AliasChoices("jwt_secret_key", "secret_key"),
    )
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Uploads
    upload_dir: str = "uploads"

    # App
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
