"""Storage contract shared by the beverage collection backends."""
from __future__ import annotations

import json
import threading
from typing import Protocol, Sequence

from pydantic import ValidationError

from ..schemas import Bottle, BeverageListAdapter, Crate

Collection = list[Bottle | Crate]


class CatalogStoreError(RuntimeError):
    """Base class for failures raised by a storage backend."""


class StorageUnavailableError(CatalogStoreError):
    """Raised when the backing file or ConfigMap cannot be read."""


class PersistenceError(CatalogStoreError):
    """Raised when writing the collection back to storage fails."""


class CorruptCollectionError(ValueError):
    """Raised when stored content is not a valid beverage collection."""


class CatalogStore(Protocol):
    """Whole-collection persistence.

    ``load`` and ``save`` are exclusive with each other on one instance.
    Callers performing a read-modify-write hold ``lock`` across both calls;
    the lock is re-entrant so the nested acquisitions are safe.
    """

    lock: threading.RLock

    @property
    def name(self) -> str: ...

    def load(self) -> Collection: ...

    def save(self, beverages: Sequence[Bottle | Crate]) -> None: ...


EMPTY_COLLECTION = "[]"


def serialize_collection(beverages: Sequence[Bottle | Crate]) -> str:
    """Render the collection as pretty-printed JSON."""

    payload = [beverage.to_json_dict() for beverage in beverages]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def deserialize_collection(text: str) -> Collection:
    """Parse stored JSON into beverage models."""

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptCollectionError(f"Invalid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise CorruptCollectionError("Stored collection must be a JSON array")
    try:
        return BeverageListAdapter.validate_python(raw)
    except ValidationError as exc:
        raise CorruptCollectionError(f"Invalid beverage entry: {exc}") from exc
