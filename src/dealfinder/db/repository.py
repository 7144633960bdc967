from __future__ import annotations

import logging
from typing import Any

from pymongo.collection import Collection

from dealfinder.db.connection import get_deals_collection
from dealfinder.query.filters import (
    SortDirection,
    SortField,
    build_predicate,
    build_sort_spec,
)

logger = logging.getLogger(__name__)


def _run_query(
    collection: Collection | None,
    predicate: dict[str, Any],
    sort_spec: dict[str, int],
    start: int,
    limit: int,
) -> list[dict[str, Any]]:
    if collection is None:
        collection = get_deals_collection()
    logger.debug("find %s skip=%s limit=%s sort=%s", predicate, start, limit, sort_spec)
    cursor = collection.find(predicate).skip(start).limit(limit)
    # pymongo rejects an empty sort; no spec means natural order.
    if sort_spec:
        cursor = cursor.sort(list(sort_spec.items()))
    deals = list(cursor)
    logger.debug("find returned %d deals", len(deals))
    return deals


def list_deals_by_category(
    category: int,
    start: int,
    limit: int,
    percent_min: float | None = None,
    price_from: float | None = None,
    price_to: float | None = None,
    sort_field: SortField | str | None = None,
    sort_direction: SortDirection | str | None = None,
    *,
    collection: Collection | None = None,
) -> list[dict[str, Any]]:
    """Page through one category, optionally narrowed by discount and price range."""
    return _run_query(
        collection,
        build_predicate(category, None, percent_min, price_from, price_to),
        build_sort_spec(sort_field, sort_direction),
        start,
        limit,
    )


def search_deals_by_text(
    category: int,
    start: int,
    limit: int,
    query: str | None,
    percent_min: float | None = None,
    price_from: float | None = None,
    price_to: float | None = None,
    sort_field: SortField | str | None = None,
    sort_direction: SortDirection | str | None = None,
    *,
    collection: Collection | None = None,
) -> list[dict[str, Any]]:
    """
    Search deals through the text index on ``name``.

    ``category`` only applies when ``query`` is empty; a text search spans all
    categories.
    """
    return _run_query(
        collection,
        build_predicate(category, query, percent_min, price_from, price_to),
        build_sort_spec(sort_field, sort_direction),
        start,
        limit,
    )
