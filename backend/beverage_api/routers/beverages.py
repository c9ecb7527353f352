"""Read-only beverage listing for customers."""
import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from ...db_client import DBHandlerClient, DBHandlerError
from ..dependencies import get_db_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/beverages", tags=["beverages"])


@router.get("")
def get_all_beverages(
    beverage_type: Literal["bottle", "crate"] | None = Query(
        default=None,
        alias="type",
        description="Restrict the listing to bottles or crates.",
    ),
    client: DBHandlerClient = Depends(get_db_client),
) -> JSONResponse:
    """Relay the DB-Handler listing, optionally filtered by beverage type."""

    try:
        upstream = client.list_beverages()
    except DBHandlerError as exc:
        logger.error("Exception occurred while connecting to DB-Handler: %s", exc)
        raise HTTPException(status_code=502, detail="Error connecting to DB-Handler") from exc

    if upstream.status_code != 200:
        logger.error(
            "Failed to fetch beverages. Status: %s. Error: %s",
            upstream.status_code,
            upstream.body,
        )
        return JSONResponse(status_code=upstream.status_code, content=upstream.body)

    logger.info("Successfully fetched beverages from DB-Handler")
    beverages = upstream.body if isinstance(upstream.body, list) else []
    if beverage_type is not None:
        beverages = [item for item in beverages if item.get("type") == beverage_type]
    return JSONResponse(status_code=200, content=beverages)
