"""Runtime configuration for the DB-Handler service."""
from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.paths import default_data_file


class DBHandlerSettings(BaseSettings):
    """Environment-aware settings for the DB-Handler service."""

    storage_backend: Literal["file", "configmap"] = Field(
        default="file",
        description="Where the beverage collection lives: a local JSON file or a ConfigMap.",
    )
    data_file: str = Field(
        default_factory=default_data_file,
        description="Path of the JSON file used by the file storage backend.",
    )
    configmap_name: str = Field(
        default="beverages", description="Name of the ConfigMap holding the collection."
    )
    configmap_namespace: str = Field(
        default="default", description="Namespace of the ConfigMap holding the collection."
    )
    configmap_key: str = Field(
        default="beverages.json",
        description="ConfigMap data key whose value is the serialized collection.",
    )
    persistent_file: str = Field(
        default="./data/persistent/payload.bin",
        description="File written by the opaque /save endpoint.",
    )
    seed_defaults: bool = Field(
        default=True, description="Insert the default beverages when the store starts empty."
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(default=9999, description="Port the HTTP server listens on.")

    model_config = SettingsConfigDict(
        env_prefix="DB_HANDLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
