from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pymongo import ASCENDING, DESCENDING


class SortField(str, Enum):
    price = "price"
    percent = "percent"
    name = "name"
    date = "date"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


# Public sort keys -> stored document fields. "price" addresses priceNew.
SORT_FIELD_COLUMNS = {
    SortField.date: "date",
    SortField.name: "name",
    SortField.percent: "percent",
    SortField.price: "priceNew",
}


def _coerce(enum_cls: type[Enum], value: Any) -> Enum | None:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def normalize_percent(percent_min: float) -> float:
    """Discounts are stored negative (-20 is "20% off"), so a minimum of 20 becomes a ceiling of -20."""
    if percent_min > 0:
        return -percent_min
    return percent_min


def build_predicate(
    category: int | None,
    query: str | None,
    percent_min: float | None,
    price_from: float | None,
    price_to: float | None,
) -> dict[str, Any]:
    """
    Build the filter document handed to ``Collection.find``.

    A non-empty ``query`` switches to a ``$text`` search and drops the category
    equality; the two never combine. Zero and None are both treated as "no
    filter" for the numeric dimensions.
    """
    predicate: dict[str, Any] = {}
    if query:
        predicate["$text"] = {"$search": query}
    else:
        predicate["category"] = category

    if percent_min:
        predicate["percent"] = {"$lte": normalize_percent(percent_min)}

    price_range: dict[str, float] = {}
    if price_from:
        price_range["$gte"] = price_from
    if price_to:
        price_range["$lte"] = price_to
    if price_range:
        predicate["priceNew"] = price_range

    return predicate


def sort_direction_number(sort_direction: SortDirection | str | None) -> int:
    # Anything other than "asc" sorts descending.
    if _coerce(SortDirection, sort_direction) is SortDirection.asc:
        return ASCENDING
    return DESCENDING


def build_sort_spec(
    sort_field: SortField | str | None,
    sort_direction: SortDirection | str | None,
) -> dict[str, int]:
    field = _coerce(SortField, sort_field)
    if field is None:
        return {}
    return {SORT_FIELD_COLUMNS[field]: sort_direction_number(sort_direction)}


@dataclass
class FilterCriteria:
    category: int | None
    query: str | None = None
    percent_min: float | None = None
    price_from: float | None = None
    price_to: float | None = None

    def to_predicate(self) -> dict[str, Any]:
        return build_predicate(
            self.category,
            self.query,
            self.percent_min,
            self.price_from,
            self.price_to,
        )
