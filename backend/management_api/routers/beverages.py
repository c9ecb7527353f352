"""Validated write access to the beverage catalog."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from ...db_client import DBHandlerClient, DBHandlerError, UpstreamResponse
from ...db_handler.schemas import BeverageCollection, BeveragePayload
from ..dependencies import get_db_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/management/beverages", tags=["management"])


def _relay(upstream: UpstreamResponse) -> Response:
    if upstream.status_code == 204 or upstream.body is None:
        return Response(status_code=upstream.status_code)
    return JSONResponse(status_code=upstream.status_code, content=upstream.body)


def _unreachable(action: str, exc: DBHandlerError) -> HTTPException:
    logger.error("Error %s: %s", action, exc)
    return HTTPException(status_code=502, detail=f"Error {action}")


@router.get("")
def get_all_beverages(client: DBHandlerClient = Depends(get_db_client)) -> Response:
    """Return the catalog as stored by the DB-Handler."""

    try:
        upstream = client.list_beverages()
    except DBHandlerError as exc:
        raise _unreachable("fetching beverages", exc) from exc
    logger.info("Fetched beverages from DB-Handler, status: %s", upstream.status_code)
    return _relay(upstream)


@router.post("")
def add_beverage(
    payload: BeveragePayload,
    client: DBHandlerClient = Depends(get_db_client),
) -> Response:
    """Validate a bottle or crate and forward it for storage."""

    body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        upstream = client.create_beverage(body)
    except DBHandlerError as exc:
        raise _unreachable("adding beverage", exc) from exc
    logger.info("Added beverage, status: %s", upstream.status_code)
    return _relay(upstream)


@router.put("/update")
def replace_beverages(
    payload: BeverageCollection,
    client: DBHandlerClient = Depends(get_db_client),
) -> Response:
    """Validate and forward a full replacement collection."""

    body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        upstream = client.replace_all(body)
    except DBHandlerError as exc:
        raise _unreachable("replacing beverages", exc) from exc
    logger.info("Replaced beverage collection, status: %s", upstream.status_code)
    return _relay(upstream)


@router.put("/{beverage_id}")
def update_beverage(
    beverage_id: str,
    payload: BeveragePayload,
    client: DBHandlerClient = Depends(get_db_client),
) -> Response:
    """Validate a replacement beverage and forward it."""

    body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        upstream = client.replace_beverage(beverage_id, body)
    except DBHandlerError as exc:
        raise _unreachable("updating beverage", exc) from exc
    logger.info("Updated beverage with id: %s, status: %s", beverage_id, upstream.status_code)
    return _relay(upstream)


@router.delete("/{beverage_id}")
def delete_beverage(
    beverage_id: str,
    client: DBHandlerClient = Depends(get_db_client),
) -> Response:
    """Forward a delete request for the given identifier."""

    try:
        upstream = client.delete_beverage(beverage_id)
    except DBHandlerError as exc:
        raise _unreachable("deleting beverage", exc) from exc
    logger.info("Deleted beverage with id: %s, status: %s", beverage_id, upstream.status_code)
    return _relay(upstream)
