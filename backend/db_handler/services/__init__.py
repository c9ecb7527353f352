"""Service layer for the DB-Handler."""

from .catalog import (
    BeverageNotFoundError,
    CatalogService,
    CatalogServiceError,
    DuplicateBeverageError,
    next_beverage_id,
)
from .persistence import PersistentFileWriter
from .seed import default_beverages, seed_default_beverages

__all__ = [
    "BeverageNotFoundError",
    "CatalogService",
    "CatalogServiceError",
    "DuplicateBeverageError",
    "PersistentFileWriter",
    "default_beverages",
    "next_beverage_id",
    "seed_default_beverages",
]
