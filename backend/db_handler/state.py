"""Shared state container for the DB-Handler service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .services import CatalogService, PersistentFileWriter, seed_default_beverages
from .settings import DBHandlerSettings
from .stores import CatalogStore, CatalogStoreError, create_store

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppState:
    """Encapsulates the storage backend and services shared across routers."""

    settings: DBHandlerSettings
    store: CatalogStore
    catalog: CatalogService
    persistent_writer: PersistentFileWriter

    def __init__(self, settings: DBHandlerSettings, store: CatalogStore | None = None) -> None:
        self.settings = settings
        self.store = store if store is not None else create_store(settings)
        self.catalog = CatalogService(self.store)
        self.persistent_writer = PersistentFileWriter(settings.persistent_file)
        if settings.seed_defaults:
            try:
                seed_default_beverages(self.store)
            except CatalogStoreError:
                logger.exception("Error initializing default beverages")
