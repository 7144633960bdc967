from __future__ import annotations

import logging
import os

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017").strip()
MONGODB_DB = os.getenv("MONGODB_DB", "dealfinder")
MONGODB_COLLECTION = os.getenv("MONGODB_COLLECTION", "deals")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))
APP_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "INFO").upper()
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or APP_LOG_LEVEL, format=LOG_FORMAT)
