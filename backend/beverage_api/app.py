"""Application factory for the Beverage API."""
import httpx
from fastapi import FastAPI

from ..db_client import DBHandlerClient
from .routers import beverages, ping
from .settings import BeverageSettings


def create_app(
    settings: BeverageSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build the customer-facing FastAPI application."""

    resolved_settings = settings or BeverageSettings()

    app = FastAPI(title="Store Beverage API", version="0.1.0")
    app.state.settings = resolved_settings
    app.state.db_client = DBHandlerClient(
        resolved_settings.db_handler_url,
        timeout=resolved_settings.request_timeout,
        transport=transport,
    )

    for router in (ping.router, beverages.router):
        app.include_router(router)

    return app
