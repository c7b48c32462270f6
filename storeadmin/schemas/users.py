import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from storeadmin.db.models.users import Role
from storeadmin.schemas.base import CamelModel


class UserCreate(CamelModel):
    email: str
    name: Optional[str] = None
    email_verified: Optional[datetime] = None
    image: Optional[str] = None
    role: Role = Role.STORE_STAFF
    store_id: Optional[int] = None


class UserResponse(CamelModel):
    id: uuid.UUID
    email: str
    name: Optional[str]
    image: Optional[str]
    role: Optional[Role]
    store_id: Optional[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserStoreUpdate(CamelModel):
    store_id: int = Field(alias="storeId")


class SessionResponse(CamelModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None


class SuccessResponse(CamelModel):
    success: bool
