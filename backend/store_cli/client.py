"""HTTP client helpers for the store CLI."""
from __future__ import annotations

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict


class CLISettings(BaseSettings):
    """Defaults for the CLI, read from ``STORE_CLI_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="STORE_CLI_", extra="ignore")

    api_base: str = "http://localhost:8090"
    request_timeout: float = 10.0


def create_client(
    base_url: str,
    *,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Open a JSON client against the Management API at ``base_url``."""

    if timeout is None:
        timeout = CLISettings().request_timeout
    return httpx.Client(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
        transport=transport,
    )
