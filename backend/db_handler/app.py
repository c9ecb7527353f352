"""Application factory for the DB-Handler service."""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routers import beverages, health
from .settings import DBHandlerSettings
from .state import AppState
from .stores import CatalogStore


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(
    settings: DBHandlerSettings | None = None,
    *,
    store: CatalogStore | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or DBHandlerSettings()
    app_state = AppState(settings=resolved_settings, store=store)

    app = FastAPI(title="Store DB-Handler", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    for router in (health.router, beverages.router):
        app.include_router(router)

    return app
