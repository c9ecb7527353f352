"""JSON file backend for the beverage collection."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Sequence

from ..schemas import Bottle, Crate
from ..utils.paths import ensure_parent_directory
from .base import (
    EMPTY_COLLECTION,
    Collection,
    CorruptCollectionError,
    PersistenceError,
    StorageUnavailableError,
    deserialize_collection,
    serialize_collection,
)

logger = logging.getLogger(__name__)


class FileCatalogStore:
    """Thread-safe store keeping the whole collection in one JSON file."""

    name = "file"

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self.lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def ensure_exists(self) -> None:
        """Create the data file with an empty collection when missing."""

        with self.lock:
            if self._path.exists():
                return
            try:
                ensure_parent_directory(self._path)
                self._path.write_text(EMPTY_COLLECTION, encoding="utf-8")
            except OSError as exc:
                raise StorageUnavailableError(
                    f"Failed to create beverages file {self._path}: {exc}"
                ) from exc
            logger.info("Created new beverages file at %s", self._path)

    def load(self) -> Collection:
        """Read the collection, resetting the file to empty when it is corrupt."""

        with self.lock:
            self.ensure_exists()
            try:
                text = self._path.read_text(encoding="utf-8")
            except OSError as exc:
                raise StorageUnavailableError(
                    f"Failed to read beverages file {self._path}: {exc}"
                ) from exc
            try:
                return deserialize_collection(text)
            except CorruptCollectionError as exc:
                logger.error("Beverages file %s is corrupt, resetting it: %s", self._path, exc)
                self._reset()
                return []

    def save(self, beverages: Sequence[Bottle | Crate]) -> None:
        """Overwrite the file with the serialized collection."""

        payload = serialize_collection(beverages)
        with self.lock:
            try:
                ensure_parent_directory(self._path)
                self._path.write_text(payload, encoding="utf-8")
            except OSError as exc:
                raise PersistenceError(
                    f"Failed to write beverages file {self._path}: {exc}"
                ) from exc

    def _reset(self) -> None:
        try:
            self._path.write_text(EMPTY_COLLECTION, encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailableError(
                f"Failed to reset corrupt beverages file {self._path}: {exc}"
            ) from exc
