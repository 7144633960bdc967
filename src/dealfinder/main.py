from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from dealfinder import config
from dealfinder.api.schemas import Deal, DealListResponse
from dealfinder.db.connection import close_client
from dealfinder.db.migrate import ensure_indexes
from dealfinder.db.repository import list_deals_by_category, search_deals_by_text
from dealfinder.query.filters import SortDirection, SortField

config.configure_logging()

app = FastAPI(title="Deal Finder API", version="0.1.0")


@app.on_event("startup")
def startup() -> None:
    ensure_indexes()


@app.on_event("shutdown")
def shutdown() -> None:
    close_client()


@app.exception_handler(PyMongoError)
def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": "deal store unavailable"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def _to_deal(doc: dict[str, Any]) -> Deal:
    return Deal(
        id=str(doc["_id"]),
        category=int(doc["category"]),
        name=doc["name"],
        date=doc.get("date"),
        percent=float(doc["percent"]),
        priceNew=float(doc["priceNew"]),
        priceOld=float(doc["priceOld"]) if doc.get("priceOld") is not None else None,
        url=doc.get("url"),
        image=doc.get("image"),
    )


@app.get("/deals", response_model=DealListResponse)
def get_deals(
    category: int = Query(...),
    start: int = Query(default=0),
    limit: int = Query(default=config.DEFAULT_PAGE_SIZE),
    percent_min: Optional[float] = Query(default=None, alias="percentMin"),
    price_from: Optional[float] = Query(default=None, alias="priceFrom"),
    price_to: Optional[float] = Query(default=None, alias="priceTo"),
    sort_field: Optional[SortField] = Query(default=None, alias="sortField"),
    sort_direction: SortDirection = Query(default=SortDirection.desc, alias="sortDirection"),
) -> DealListResponse:
    docs = list_deals_by_category(
        category,
        start,
        limit,
        percent_min,
        price_from,
        price_to,
        sort_field,
        sort_direction,
    )
    return DealListResponse(start=start, limit=limit, items=[_to_deal(doc) for doc in docs])


@app.get("/deals/search", response_model=DealListResponse)
def search_deals(
    q: str = Query(..., min_length=1),
    category: int = Query(default=0),
    start: int = Query(default=0),
    limit: int = Query(default=config.DEFAULT_PAGE_SIZE),
    percent_min: Optional[float] = Query(default=None, alias="percentMin"),
    price_from: Optional[float] = Query(default=None, alias="priceFrom"),
    price_to: Optional[float] = Query(default=None, alias="priceTo"),
    sort_field: Optional[SortField] = Query(default=None, alias="sortField"),
    sort_direction: SortDirection = Query(default=SortDirection.desc, alias="sortDirection"),
) -> DealListResponse:
    docs = search_deals_by_text(
        category,
        start,
        limit,
        q,
        percent_min,
        price_from,
        price_to,
        sort_field,
        sort_direction,
    )
    return DealListResponse(start=start, limit=limit, items=[_to_deal(doc) for doc in docs])
