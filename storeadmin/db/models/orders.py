import uuid
from decimal import Decimal
from sqlalchemy import Integer, Numeric, DateTime, ForeignKey, Uuid, func
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from storeadmin.db.database import Base
from storeadmin.db.models.stores import Status, status_enum


class Orders(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id"), nullable=False)
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, ForeignKey("users.id"), nullable=True)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[Status] = mapped_column(status_enum, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
