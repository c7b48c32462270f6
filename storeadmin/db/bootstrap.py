"""
Idempotent schema creation, run once at application startup.
Enum types are created only after checking pg_type; tables are created only if missing.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from storeadmin.db.models import Base, status_enum, role_enum


logger = logging.getLogger(__name__)

ENUM_TYPES = (status_enum, role_enum)


def _enum_type_exists(conn: Connection, name: str) -> bool:
    row = conn.execute(
        text("SELECT 1 FROM pg_type WHERE typname = :name"),
        {"name": name},
    ).first()
    return row is not None


def ensure_enum_types(conn: Connection) -> None:
    if conn.dialect.name != "postgresql":
        # non-native enums are plain VARCHAR columns created with their tables
        return

    for enum_type in ENUM_TYPES:
        if _enum_type_exists(conn, enum_type.name):
            continue
        enum_type.create(conn, checkfirst=False)
        logger.info(f"Created enum type {enum_type.name}")


def ensure_tables_exist(engine: Engine) -> None:
    try:
        with engine.begin() as conn:
            ensure_enum_types(conn)
            Base.metadata.create_all(conn, checkfirst=True)
    except SQLAlchemyError:
        logger.exception("Error creating tables")
        raise

    logger.info("Tables created successfully")
