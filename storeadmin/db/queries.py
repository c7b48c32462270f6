"""
Data-access functions.

Every function takes the request's Session. Database failures are logged and
raised as DataAccessError so an empty result always means "no rows", never
"the query failed". update_user_store is the one exception: it reports
failure as False.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storeadmin.db.models.products import Products
from storeadmin.db.models.stores import Stores, Status
from storeadmin.db.models.users import Users


logger = logging.getLogger(__name__)

PAGE_SIZE = 5


class DataAccessError(Exception):
    pass


@dataclass
class ProductPage:
    products: List[Products]
    new_offset: Optional[int]
    total_products: int


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_active_stores(db: Session) -> List[Stores]:
    try:
        return (
            db.query(Stores)
            .filter(Stores.status == Status.ACTIVE)
            .order_by(Stores.id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching stores: {e}")
        raise DataAccessError("Failed to fetch stores") from e


def create_store(
    db: Session,
    name: str,
    address: str,
    phone: str,
    email: str,
    status: Status = Status.ACTIVE,
) -> Stores:
    store = Stores(name=name, address=address, phone=phone, email=email, status=status)
    db.add(store)
    try:
        db.commit()
        db.refresh(store)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating store: {e}")
        raise DataAccessError("Failed to create store") from e
    return store


def update_user_store(db: Session, user_id: str, store_id: int) -> bool:
    """Assign a user to a store. Returns False instead of raising."""
    try:
        user_uuid = uuid.UUID(str(user_id))
    except ValueError:
        logger.warning(f"Cannot update store for malformed user id {user_id!r}")
        return False

    try:
        updated = (
            db.query(Users)
            .filter(Users.id == user_uuid)
            .update({Users.store_id: store_id}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating user store: {e}")
        return False

    if updated == 0:
        logger.warning(f"No user {user_uuid} to assign to store {store_id}")
        return False
    return True


def get_products(
    db: Session,
    search: str,
    offset: int,
    store_id: Optional[int] = None,
) -> ProductPage:
    """
    One page of products, filtered by a case-insensitive name substring and/or store.
    new_offset is None once a short page signals the end of the results.
    """
    conditions = []
    if search:
        conditions.append(Products.name.ilike(f"%{_escape_like(search)}%", escape="\\"))
    if store_id is not None:
        conditions.append(Products.store_id == store_id)

    try:
        total_products = db.query(func.count(Products.id)).filter(*conditions).scalar()
        products = (
            db.query(Products)
            .filter(*conditions)
            .order_by(Products.id)
            .offset(offset)
            .limit(PAGE_SIZE)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {e}")
        raise DataAccessError("Failed to fetch products") from e

    new_offset = offset + PAGE_SIZE if len(products) >= PAGE_SIZE else None
    return ProductPage(products=products, new_offset=new_offset, total_products=total_products or 0)


def delete_product_by_id(db: Session, product_id: int) -> None:
    try:
        db.query(Products).filter(Products.id == product_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting product {product_id}: {e}")
        raise DataAccessError("Failed to delete product") from e


def get_user_by_email(db: Session, email: str) -> Optional[Users]:
    try:
        return db.query(Users).filter(Users.email == email).first()
    except SQLAlchemyError as e:
        logger.error(f"Error looking up user by email: {e}")
        raise DataAccessError("Failed to look up user") from e
