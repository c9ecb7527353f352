"""Runtime configuration for the Management API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ManagementSettings(BaseSettings):
    """Environment-aware settings for the Management API."""

    db_handler_url: str = Field(
        default="http://db:9999/v1/beverages",
        description="Base URL of the DB-Handler beverage collection.",
    )
    request_timeout: float = Field(
        default=10.0, description="Timeout in seconds for calls to the DB-Handler."
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8090)

    model_config = SettingsConfigDict(
        env_prefix="MANAGEMENT_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
