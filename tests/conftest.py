import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASS", "test")
os.environ.setdefault("DB_NAME", "store_admin_test")

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from fastapi.testclient import TestClient
from jose import jwt

from storeadmin.core.config import Settings, settings
from storeadmin.core.security import ALGORITHM
from storeadmin.db.bootstrap import ensure_tables_exist
from storeadmin.db.database import build_engine, build_session_factory
from storeadmin.db.models.products import Products
from storeadmin.db.models.stores import Stores, Status
from storeadmin.db.models.users import Users
from storeadmin.main import create_app
from storeadmin.schemas.products import ProductCreate
from storeadmin.schemas.users import UserCreate


def create_session_token(claims: dict, expires_delta: timedelta = timedelta(hours=1)) -> str:
    # signed the way the sign-in provider signs its session tokens
    to_encode = dict(claims, exp=datetime.now(timezone.utc) + expires_delta)
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def session_headers(user_id: Optional[str] = None, email: Optional[str] = "staff@shop.test") -> dict:
    # bearer token as minted by the sign-in provider
    claims = {"name": "Test User"}
    if email:
        claims["email"] = email
    if user_id:
        claims["sub"] = user_id
    return {"Authorization": f"Bearer {create_session_token(claims)}"}


def add_store(db, name: str = "Shop A", status: Status = Status.ACTIVE) -> Stores:
    store = Stores(
        name=name,
        address="1 Main St",
        phone="555-0100",
        email=f"{name.lower().replace(' ', '-')}@shop.test",
        status=status,
    )
    db.add(store)
    db.commit()
    return store


def add_user(db, email: str = "staff@shop.test", store_id: Optional[int] = None) -> Users:
    user = Users(**UserCreate(email=email, name="Staff", store_id=store_id).model_dump())
    db.add(user)
    db.commit()
    return user


def add_product(db, store_id: int, name: str, price: str = "9.99") -> Products:
    product = Products(**ProductCreate(
        store_id=store_id,
        image_url=f"https://cdn.shop.test/{name}.png",
        name=name,
        status=Status.ACTIVE,
        price=Decimal(price),
        stock=10,
        available_at=datetime(2024, 1, 1, 9, 0),
    ).model_dump())
    db.add(product)
    db.commit()
    return product


@pytest.fixture
def engine(tmp_path):
    settings = Settings(SECRET_KEY="test-secret-key", DATABASE_URL=f"sqlite:///{tmp_path / 'store_admin.db'}")
    engine = build_engine(settings)
    ensure_tables_exist(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine=engine)) as c:
        yield c
