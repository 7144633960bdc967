from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest


def _matches(doc: dict[str, Any], predicate: dict[str, Any]) -> bool:
    for key, cond in predicate.items():
        if key == "$text":
            terms = cond["$search"].lower().split()
            if not any(term in doc.get("name", "").lower() for term in terms):
                return False
            continue
        value = doc.get(key)
        if isinstance(cond, dict):
            if "$lte" in cond and not (value is not None and value <= cond["$lte"]):
                return False
            if "$gte" in cond and not (value is not None and value >= cond["$gte"]):
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]], predicate: dict[str, Any]):
        self._docs = docs
        self.predicate = predicate
        self.skipped = 0
        self.limited = 0
        self.sort_keys: list[tuple[str, int]] | None = None

    def skip(self, n: int) -> "FakeCursor":
        self.skipped = n
        return self

    def limit(self, n: int) -> "FakeCursor":
        self.limited = n
        return self

    def sort(self, keys: list[tuple[str, int]]) -> "FakeCursor":
        if not keys:
            raise ValueError("key_or_list must not be empty")
        self.sort_keys = keys
        return self

    def __iter__(self):
        rows = [doc for doc in self._docs if _matches(doc, self.predicate)]
        for field, direction in reversed(self.sort_keys or []):
            rows.sort(key=lambda d: d[field], reverse=direction < 0)
        rows = rows[self.skipped :]
        if self.limited:
            rows = rows[: self.limited]
        return iter([dict(row) for row in rows])


class FakeCollection:
    """Just enough of pymongo's Collection for the read path and index bootstrap."""

    name = "deals"

    def __init__(self, docs: list[dict[str, Any]] | None = None):
        self.docs = list(docs or [])
        self.cursors: list[FakeCursor] = []
        self.indexes: list[tuple[list[tuple[str, Any]], str]] = []
        self.writes: list[Any] = []

    def find(self, predicate: dict[str, Any]) -> FakeCursor:
        cursor = FakeCursor(self.docs, predicate)
        self.cursors.append(cursor)
        return cursor

    def create_index(self, keys: list[tuple[str, Any]], name: str) -> str:
        self.indexes.append((keys, name))
        return name

    def drop(self) -> None:
        self.docs.clear()

    def bulk_write(self, ops: list[Any]) -> Any:
        self.writes = list(ops)
        return SimpleNamespace(upserted_count=len(ops), modified_count=0)

    @property
    def last_cursor(self) -> FakeCursor:
        return self.cursors[-1]


@pytest.fixture
def deals_collection() -> FakeCollection:
    return FakeCollection(
        [
            {"_id": "a1", "category": 1, "name": "Gaming Mouse", "date": 3, "percent": -30, "priceNew": 50},
            {"_id": "a2", "category": 1, "name": "Office Chair", "date": 1, "percent": -10, "priceNew": 80},
            {"_id": "b1", "category": 2, "name": "Gaming Chair", "date": 2, "percent": -50, "priceNew": 120},
        ]
    )
