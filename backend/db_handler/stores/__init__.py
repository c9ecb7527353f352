"""Storage backends for the beverage collection."""
from __future__ import annotations

from ..settings import DBHandlerSettings
from .base import (
    CatalogStore,
    CatalogStoreError,
    PersistenceError,
    StorageUnavailableError,
)
from .file_store import FileCatalogStore


def create_store(settings: DBHandlerSettings) -> CatalogStore:
    """Instantiate the storage backend selected by ``storage_backend``."""

    if settings.storage_backend == "configmap":
        from .configmap_store import ConfigMapCatalogStore

        return ConfigMapCatalogStore(
            name=settings.configmap_name,
            namespace=settings.configmap_namespace,
            key=settings.configmap_key,
        )
    store = FileCatalogStore(settings.data_file)
    store.ensure_exists()
    return store


__all__ = [
    "CatalogStore",
    "CatalogStoreError",
    "FileCatalogStore",
    "PersistenceError",
    "StorageUnavailableError",
    "create_store",
]
