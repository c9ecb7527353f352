"""FastAPI dependencies for the Beverage API."""
from fastapi import Request

from ..db_client import DBHandlerClient


def get_db_client(request: Request) -> DBHandlerClient:
    """Return the DB-Handler client built by the application factory."""
    return request.app.state.db_client
