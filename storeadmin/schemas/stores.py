from datetime import datetime
from typing import Optional

from storeadmin.db.models.stores import Status
from storeadmin.schemas.base import CamelModel


class StoreBase(CamelModel):
    name: str
    address: str
    phone: str
    email: str


class StoreCreate(StoreBase):
    pass


class StoreResponse(StoreBase):
    id: int
    status: Status
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
