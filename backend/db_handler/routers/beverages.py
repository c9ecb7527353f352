"""Beverage collection endpoints backed by the catalog service."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.concurrency import run_in_threadpool

from ..dependencies import get_catalog_service, get_persistent_writer
from ..schemas import BeverageCollection, BeveragePayload, SaveResponse
from ..services import (
    BeverageNotFoundError,
    CatalogService,
    DuplicateBeverageError,
    PersistentFileWriter,
)
from ..stores import CatalogStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/beverages", tags=["beverages"])


def _storage_failure(action: str, exc: CatalogStoreError) -> HTTPException:
    logger.error("Error %s: %s", action, exc, exc_info=exc)
    return HTTPException(status_code=500, detail=f"Error {action}")


@router.get("", response_model=BeverageCollection)
def list_beverages(catalog: CatalogService = Depends(get_catalog_service)) -> BeverageCollection:
    """Return every stored beverage in order."""

    try:
        return BeverageCollection(catalog.list())
    except CatalogStoreError as exc:
        raise _storage_failure("fetching beverages", exc) from exc


@router.post("", response_model=BeveragePayload, status_code=201)
def add_beverage(
    payload: BeveragePayload,
    catalog: CatalogService = Depends(get_catalog_service),
) -> BeveragePayload:
    """Store a beverage, assigning an identifier when the payload has none."""

    try:
        return BeveragePayload(catalog.create(payload.root))
    except DuplicateBeverageError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except CatalogStoreError as exc:
        raise _storage_failure("adding beverage", exc) from exc


@router.put("/update", response_model=BeverageCollection)
def replace_beverages(
    payload: BeverageCollection,
    catalog: CatalogService = Depends(get_catalog_service),
) -> BeverageCollection:
    """Overwrite the stored collection with the supplied one."""

    try:
        return BeverageCollection(catalog.replace_all(payload.root))
    except DuplicateBeverageError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except CatalogStoreError as exc:
        raise _storage_failure("replacing beverages", exc) from exc


@router.post("/save", response_model=SaveResponse)
async def save_payload(
    request: Request,
    writer: PersistentFileWriter = Depends(get_persistent_writer),
) -> SaveResponse:
    """Write the raw request body to the persistent file."""

    body = await request.body()
    try:
        path = await run_in_threadpool(writer.write, body)
    except CatalogStoreError as exc:
        raise _storage_failure("saving payload", exc) from exc
    return SaveResponse(path=str(path), size=len(body))


@router.put("/{beverage_id}", response_model=BeveragePayload)
def update_beverage(
    beverage_id: str,
    payload: BeveragePayload,
    catalog: CatalogService = Depends(get_catalog_service),
) -> BeveragePayload:
    """Replace a beverage while keeping its identifier."""

    try:
        return BeveragePayload(catalog.replace(beverage_id, payload.root))
    except BeverageNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Beverage not found") from exc
    except CatalogStoreError as exc:
        raise _storage_failure("updating beverage", exc) from exc


@router.delete("/{beverage_id}", status_code=204, response_class=Response)
def delete_beverage(
    beverage_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete every beverage carrying the given identifier."""

    try:
        catalog.delete(beverage_id)
    except BeverageNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Beverage not found") from exc
    except CatalogStoreError as exc:
        raise _storage_failure("deleting beverage", exc) from exc
    return Response(status_code=204)
