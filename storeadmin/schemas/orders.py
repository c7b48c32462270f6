import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from storeadmin.db.models.stores import Status
from storeadmin.schemas.base import CamelModel


class OrderCreate(CamelModel):
    store_id: int
    user_id: Optional[uuid.UUID] = None
    total_amount: Decimal = Field(max_digits=10, decimal_places=2)
    status: Status


class OrderResponse(OrderCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderItemCreate(CamelModel):
    order_id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: int
    price: Decimal = Field(max_digits=10, decimal_places=2)


class OrderItemResponse(OrderItemCreate):
    id: int
    created_at: Optional[datetime] = None
