"""CRUD operations over the stored beverage collection."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..schemas import Bottle, Crate
from ..stores.base import CatalogStore, Collection

logger = logging.getLogger(__name__)


class CatalogServiceError(RuntimeError):
    """Raised when a catalog operation cannot be applied."""


class BeverageNotFoundError(CatalogServiceError):
    """Raised when no beverage matches the requested identifier."""

    def __init__(self, beverage_id: object) -> None:
        super().__init__(f"Beverage {beverage_id} not found")
        self.beverage_id = beverage_id


class DuplicateBeverageError(CatalogServiceError):
    """Raised when a mutation would leave two beverages with the same identifier."""

    def __init__(self, beverage_id: object) -> None:
        super().__init__(f"Beverage {beverage_id} already exists")
        self.beverage_id = beverage_id


def _same_id(left: object, right: object) -> bool:
    return left is not None and str(left) == str(right)


def _numeric_id(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value))
    except ValueError:
        return None


def next_beverage_id(beverages: Iterable[Bottle | Crate]) -> int:
    """Return one past the highest numeric identifier, or 1 for an empty collection."""

    highest = 0
    for beverage in beverages:
        numeric = _numeric_id(beverage.id)
        if numeric is not None:
            highest = max(highest, numeric)
    return highest + 1


class CatalogService:
    """Backend-agnostic catalog operations.

    Every operation reloads the collection from the store. Mutations hold
    the store lock from load to save so concurrent writers cannot interleave,
    and storage errors propagate to the caller untouched.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    @property
    def store(self) -> CatalogStore:
        return self._store

    def list(self) -> Collection:
        """Return the stored collection in order."""

        beverages = self._store.load()
        logger.info("Fetched %d beverages from %s store", len(beverages), self._store.name)
        return beverages

    def create(self, beverage: Bottle | Crate) -> Bottle | Crate:
        """Append a beverage, assigning the next identifier when none is given."""

        with self._store.lock:
            beverages = self._store.load()
            if beverage.id is None:
                created = beverage.model_copy(update={"id": next_beverage_id(beverages)})
            elif any(_same_id(existing.id, beverage.id) for existing in beverages):
                raise DuplicateBeverageError(beverage.id)
            else:
                created = beverage
            beverages.append(created)
            self._store.save(beverages)
        logger.info("Added %s beverage with id %s", created.type, created.id)
        return created

    def delete(self, beverage_id: int | str) -> None:
        """Remove every beverage whose identifier matches ``beverage_id``."""

        with self._store.lock:
            beverages = self._store.load()
            remaining = [item for item in beverages if not _same_id(item.id, beverage_id)]
            if len(remaining) == len(beverages):
                logger.warning("No beverage found with id %s", beverage_id)
                raise BeverageNotFoundError(beverage_id)
            self._store.save(remaining)
        logger.info("Deleted beverage with id %s", beverage_id)

    def replace(self, beverage_id: int | str, beverage: Bottle | Crate) -> Bottle | Crate:
        """Overwrite the matching beverage in place, keeping its identifier."""

        with self._store.lock:
            beverages = self._store.load()
            for index, existing in enumerate(beverages):
                if _same_id(existing.id, beverage_id):
                    updated = beverage.model_copy(update={"id": existing.id})
                    beverages[index] = updated
                    break
            else:
                logger.warning("No beverage found with id %s", beverage_id)
                raise BeverageNotFoundError(beverage_id)
            self._store.save(beverages)
        logger.info("Updated beverage with id %s", beverage_id)
        return updated

    def replace_all(self, beverages: Sequence[Bottle | Crate]) -> Collection:
        """Replace the stored collection with ``beverages``."""

        seen: set[str] = set()
        for beverage in beverages:
            if beverage.id is None:
                continue
            key = str(beverage.id)
            if key in seen:
                raise DuplicateBeverageError(beverage.id)
            seen.add(key)

        collection = list(beverages)
        with self._store.lock:
            self._store.save(collection)
        logger.info("Replaced beverage collection with %d entries", len(collection))
        return collection
