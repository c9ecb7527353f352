"""Ping and health endpoints."""
from fastapi import APIRouter, Depends

from ..dependencies import get_settings
from ..schemas import HealthStatus, PingResponse
from ..settings import DBHandlerSettings

router = APIRouter(tags=["health"])


@router.get("/ping", response_model=PingResponse)
def ping() -> PingResponse:
    """Return a static liveness reply."""
    return PingResponse()


@router.get("/health", response_model=HealthStatus)
def get_health(settings: DBHandlerSettings = Depends(get_settings)) -> HealthStatus:
    """Return service heartbeat information."""
    return HealthStatus(storage_backend=settings.storage_backend)
