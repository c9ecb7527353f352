"""FastAPI dependencies for the DB-Handler service."""
from fastapi import Depends, Request

from .services import CatalogService, PersistentFileWriter
from .settings import DBHandlerSettings
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_settings(app_state: AppState = Depends(get_app_state)) -> DBHandlerSettings:
    """Return the settings the application was built with."""
    return app_state.settings


def get_catalog_service(app_state: AppState = Depends(get_app_state)) -> CatalogService:
    """Return the catalog service dependency."""
    return app_state.catalog


def get_persistent_writer(app_state: AppState = Depends(get_app_state)) -> PersistentFileWriter:
    """Return the opaque payload writer."""
    return app_state.persistent_writer
