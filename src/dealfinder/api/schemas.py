from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class Deal(BaseModel):
    id: str
    category: int
    name: str
    date: Optional[datetime]
    percent: float
    priceNew: float
    priceOld: Optional[float] = None
    url: Optional[str] = None
    image: Optional[str] = None


class DealListResponse(BaseModel):
    start: int
    limit: int
    items: List[Deal]
