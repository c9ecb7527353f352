"""Default beverages inserted into an empty store on first start."""
from __future__ import annotations

import logging

from ..schemas import Bottle, Crate
from ..stores.base import CatalogStore, Collection

logger = logging.getLogger(__name__)


def default_beverages() -> Collection:
    cola = Bottle(
        id=1,
        name="Cola Bottle",
        volume=0.5,
        is_alcoholic=False,
        volume_percent=0.0,
        price=1.5,
        supplier="CocaCola",
        in_stock=100,
    )
    beer = Bottle(
        id=2,
        name="Beer Bottle",
        volume=0.33,
        is_alcoholic=True,
        volume_percent=5.0,
        price=2.0,
        supplier="Brewery",
        in_stock=50,
    )
    crate = Crate(id=3, bottle=beer, no_of_bottles=20, price=35.0, in_stock=10)
    return [cola, beer, crate]


def seed_default_beverages(store: CatalogStore) -> bool:
    """Populate ``store`` with the defaults if it is empty.

    Returns ``True`` when the defaults were written and ``False`` when the
    store already held beverages.
    """

    logger.info("Checking %s store for default beverages", store.name)
    with store.lock:
        if store.load():
            return False
        store.save(default_beverages())
    logger.info("Inserted default beverages into %s store", store.name)
    return True
