"""Application factory for the Management API."""
import httpx
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..db_client import DBHandlerClient
from .routers import beverages, ping
from .settings import ManagementSettings


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(
    settings: ManagementSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build the management FastAPI application."""

    resolved_settings = settings or ManagementSettings()

    app = FastAPI(title="Store Management API", version="0.1.0")
    app.state.settings = resolved_settings
    app.state.db_client = DBHandlerClient(
        resolved_settings.db_handler_url,
        timeout=resolved_settings.request_timeout,
        transport=transport,
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    for router in (ping.router, beverages.router):
        app.include_router(router)

    return app
