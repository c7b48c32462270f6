from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from storeadmin.db.models.stores import Status
from storeadmin.schemas.base import CamelModel


class ProductCreate(CamelModel):
    store_id: int
    image_url: str
    name: str
    description: Optional[str] = None
    status: Status
    price: Decimal = Field(max_digits=10, decimal_places=2)
    stock: int
    available_at: datetime


class ProductResponse(ProductCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductPageResponse(CamelModel):
    products: List[ProductResponse]
    new_offset: Optional[int]
    total_products: int
