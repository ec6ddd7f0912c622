# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Client configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WPKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # WordPress.com REST API
    api_base_url: str = "https://public-api.wordpress.com/"
    oauth_token: str = ""
    timeout: float = 15.0
    user_agent: str = ""
    locale: str = "en"

    # WordPress.org plugin directory
    plugin_directory_url: str = "https://api.wordpress.org/"

    # OAuth client used for site creation
    client_id: str = ""
    client_secret: str = ""

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("api_base_url", "plugin_directory_url")
    @classmethod
    def _ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else f"{v}/"


def get_settings() -> Settings:
    return Settings()
