from sqlalchemy import Integer, String, DateTime, func, Enum as SQLEnum
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum
from storeadmin.db.database import Base


class Status(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


# one "status" type shared by stores, products and orders
status_enum = SQLEnum(Status, name="status", values_callable=lambda e: [m.value for m in e])


class Stores(Base):
    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    address: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[Status] = mapped_column(status_enum, nullable=False, default=Status.ACTIVE, server_default=Status.ACTIVE.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
