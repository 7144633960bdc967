from __future__ import annotations

from functools import lru_cache

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from dealfinder import config


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    # MongoClient pools connections and is safe to share across threads.
    return MongoClient(config.MONGODB_URI, serverSelectionTimeoutMS=config.MONGODB_TIMEOUT_MS)


def get_db() -> Database:
    return get_client()[config.MONGODB_DB]


def get_deals_collection() -> Collection:
    return get_db()[config.MONGODB_COLLECTION]


def close_client() -> None:
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()
