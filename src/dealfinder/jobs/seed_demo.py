from __future__ import annotations

import argparse
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from pymongo import UpdateOne
from pymongo.collection import Collection

from dealfinder.config import configure_logging
from dealfinder.db.connection import get_deals_collection
from dealfinder.db.migrate import ensure_indexes

logger = logging.getLogger(__name__)

ELECTRONICS = 1
HOME = 2


def demo_deals() -> list[dict[str, Any]]:
    now = datetime.now(timezone.utc)
    return [
        {
            "category": ELECTRONICS,
            "name": "Noise Cancelling Headphones WH-1000",
            "date": now - timedelta(hours=5),
            "percent": -30,
            "priceNew": 209.99,
            "priceOld": 299.99,
            "url": "https://shop.example.com/p/headphones-wh-1000",
        },
        {
            "category": ELECTRONICS,
            "name": "USB-C Charger 65W",
            "date": now - timedelta(hours=3),
            "percent": -10,
            "priceNew": 35.99,
            "priceOld": 39.99,
            "url": "https://shop.example.com/p/usb-c-charger-65w",
        },
        {
            "category": ELECTRONICS,
            "name": "Mechanical Keyboard TKL",
            "date": now - timedelta(days=1),
            "percent": -45,
            "priceNew": 54.90,
            "priceOld": 99.90,
            "url": "https://shop.example.com/p/mechanical-keyboard-tkl",
        },
        {
            "category": HOME,
            "name": "Cast Iron Skillet 28 cm",
            "date": now - timedelta(hours=8),
            "percent": -25,
            "priceNew": 29.99,
            "priceOld": 39.99,
            "url": "https://shop.example.com/p/cast-iron-skillet-28",
        },
        {
            "category": HOME,
            "name": "Robot Vacuum with Charging Dock",
            "date": now - timedelta(hours=1),
            "percent": -5,
            "priceNew": 284.05,
            "priceOld": 299.00,
            "url": "https://shop.example.com/p/robot-vacuum",
        },
    ]


def seed(collection: Collection | None = None, *, drop: bool = False) -> int:
    if collection is None:
        collection = get_deals_collection()
    if drop:
        collection.drop()
    ensure_indexes(collection)

    ops = [
        UpdateOne({"category": deal["category"], "name": deal["name"]}, {"$set": deal}, upsert=True)
        for deal in demo_deals()
    ]
    result = collection.bulk_write(ops)
    total = result.upserted_count + result.modified_count
    logger.info("Seeded %d demo deals into %s", total, collection.name)
    return total


def main() -> None:
    parser = argparse.ArgumentParser(description="Load demo deals into the deals collection.")
    parser.add_argument("--drop", action="store_true", help="drop the collection before seeding")
    args = parser.parse_args()

    configure_logging()
    count = seed(drop=args.drop)
    print(f"Seeded {count} deals at {datetime.now(timezone.utc).isoformat()}")


if __name__ == "__main__":
    main()
