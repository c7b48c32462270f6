import uuid
from sqlalchemy import String, Integer, DateTime, ForeignKey, Uuid, func, Enum as SQLEnum
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum
from storeadmin.db.database import Base


class Role(str, Enum):
    ADMIN = "admin"
    STORE_MANAGER = "store_manager"
    STORE_STAFF = "store_staff"


role_enum = SQLEnum(Role, name="role", values_callable=lambda e: [m.value for m in e])


class Users(Base):
    """Rows are created by the sign-in provider on first login."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    email_verified: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    role: Mapped[Optional[Role]] = mapped_column(role_enum, default=Role.STORE_STAFF, server_default=Role.STORE_STAFF.value)
    store_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("stores.id"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
