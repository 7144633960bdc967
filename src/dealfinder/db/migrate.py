from __future__ import annotations

import logging

from pymongo import ASCENDING, TEXT
from pymongo.collection import Collection

from dealfinder.config import configure_logging
from dealfinder.db.connection import get_deals_collection

logger = logging.getLogger(__name__)

# (name, keys). create_index is a no-op when an identical index exists.
DEAL_INDEXES = [
    ("name_text", [("name", TEXT)]),
    ("category_1", [("category", ASCENDING)]),
    ("priceNew_1", [("priceNew", ASCENDING)]),
]


def ensure_indexes(collection: Collection | None = None) -> list[str]:
    if collection is None:
        collection = get_deals_collection()
    created = []
    for name, keys in DEAL_INDEXES:
        created.append(collection.create_index(keys, name=name))
    logger.info("Ensured indexes on %s: %s", collection.name, ", ".join(created))
    return created


if __name__ == "__main__":
    configure_logging()
    ensure_indexes()
    print("Indexes applied.")
