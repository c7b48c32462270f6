"""
Database engine construction.

The engine is built once by the application factory and handed down through
app.state; nothing in this module holds a live connection.
"""

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from storeadmin.core.config import Settings


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def build_database_url(settings: Settings) -> URL:
    if settings.DATABASE_URL:
        return make_url(settings.DATABASE_URL)
    return URL.create(
        "postgresql+psycopg2",
        username=settings.DB_USER,
        password=settings.DB_PASS,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=settings.DB_NAME,
    )


def build_ssl_args(settings: Settings) -> dict:
    """
    libpq TLS options for client-certificate auth.
    The server certificate is not verified against a hostname (sslmode=require).
    """
    paths = {
        "sslrootcert": Path(settings.DB_SSL_CA),
        "sslcert": Path(settings.DB_SSL_CERT),
        "sslkey": Path(settings.DB_SSL_KEY),
    }
    for name, path in paths.items():
        if not path.is_file():
            raise FileNotFoundError(f"TLS file for {name} not found: {path.resolve()}")

    args = {name: str(path.resolve()) for name, path in paths.items()}
    args["sslmode"] = "require"
    return args


def build_engine(settings: Settings) -> Engine:
    url = build_database_url(settings)

    if url.get_backend_name() == "postgresql":
        engine = create_engine(
            url,
            pool_size=settings.DB_POOL_SIZE,
            pool_pre_ping=True,
            connect_args=build_ssl_args(settings),
            echo=settings.DEBUG,
        )
    elif url.get_backend_name() == "sqlite":
        engine = create_engine(url, connect_args={"check_same_thread": False}, echo=settings.DEBUG)
    else:
        engine = create_engine(url, echo=settings.DEBUG)

    logger.info(f"Database engine created for {url.render_as_string(hide_password=True)}")
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)
